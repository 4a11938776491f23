from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

import numpy as np
from sklearn.utils import check_random_state

from logging_config import get_logger


logger = get_logger(__name__)


@dataclass
class Dataset2D:
    X: np.ndarray
    y: np.ndarray
    name: str = "dataset"
    meta: Dict[str, Any] = field(default_factory=dict)

    def __len__(self) -> int:
        return self.X.shape[0]

    def copy(self) -> "Dataset2D":
        return Dataset2D(self.X.copy(), self.y.copy(), self.name, dict(self.meta))


def validate_xy(X, y) -> Tuple[np.ndarray, np.ndarray]:
    X = np.asarray(X)
    y = np.asarray(y).ravel()

    if X.ndim != 2 or X.shape[1] != 2:
        raise ValueError(f"X must be shape (n, 2). Got {X.shape}")
    if X.shape[0] == 0:
        raise ValueError("X must contain at least one point")
    if y.shape[0] != X.shape[0]:
        raise ValueError(f"y must be shape (n,). Got {y.shape} vs X {X.shape}")

    uniq = set(np.unique(y).tolist())
    if not uniq.issubset({-1, 1}):
        raise ValueError(f"y must contain only -1 and 1. Got {sorted(uniq)}")

    return X, y.astype(int)


def generate_dataset(
    count: int,
    width: int,
    height: int,
    seed: Union[None, int, np.random.RandomState] = None,
) -> Dataset2D:
    """
    Two disjoint rectangles of integer points in screen space.

    The first ``count // 2`` points lie in the top-left quarter of the
    ``width x height`` window and are labeled +1, the rest lie in the
    bottom-right quarter and are labeled -1.
    """
    if count <= 0 or count % 2:
        raise ValueError(f"count must be a positive even number. Got {count}")
    if width < 2 or height < 2:
        raise ValueError(f"Window must be at least 2x2. Got {width}x{height}")

    rng = check_random_state(seed)
    half = count // 2
    half_w, half_h = width // 2, height // 2

    positive = np.column_stack(
        (rng.randint(0, half_w, size=half), rng.randint(0, half_h, size=half))
    )
    negative = np.column_stack(
        (
            rng.randint(0, half_w, size=half) + half_w,
            rng.randint(0, half_h, size=half) + half_h,
        )
    )

    X = np.vstack((positive, negative)).astype(int)
    y = np.concatenate((np.ones(half, dtype=int), -np.ones(half, dtype=int)))

    logger.debug("Generated %d points in a %dx%d window", count, width, height)
    return Dataset2D(
        X, y, name="quadrants", meta={"width": width, "height": height, "seed": seed}
    )
