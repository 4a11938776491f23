from dataclasses import dataclass
from numbers import Integral

import numpy as np
from tqdm import tqdm

from config import FEATURE_COORDINATE, FEATURE_LABEL, FEATURE_MODES
from generate_dataset_2d import validate_xy
from logging_config import get_logger


logger = get_logger(__name__)


class NumericOverflow(ArithmeticError):
    """Training produced a non-finite weight or bias."""

    def __init__(self, model):
        super().__init__(
            f"Training diverged: w=({model.w0}, {model.w1}), b={model.b}"
        )
        self.model = model


@dataclass(frozen=True)
class LinearModel:
    w0: float = 0.0
    w1: float = 0.0
    b: float = 0.0

    @property
    def w(self):
        return np.array([self.w0, self.w1])

    def is_finite(self):
        return bool(np.all(np.isfinite([self.w0, self.w1, self.b])))

    def decision_function(self, features):
        features = np.asarray(features, dtype=float)
        return features @ self.w + self.b

    def predict(self, features):
        out = np.sign(self.decision_function(features))
        out[out == 0] = 1
        return out.astype(int)


def features(X, y, feature_mode=FEATURE_LABEL):
    """
    Feature matrix fed to the update rule.

    Column 0 is always the x coordinate. Column 1 is the sample's own label
    in ``"label"`` mode, which reproduces the reference update rule, or its
    y coordinate in ``"coordinate"`` mode.
    """
    X = np.asarray(X, dtype=float)
    if feature_mode == FEATURE_LABEL:
        second = np.asarray(y, dtype=float)
    elif feature_mode == FEATURE_COORDINATE:
        second = X[:, 1]
    else:
        raise ValueError(
            f"feature_mode must be one of {FEATURE_MODES}. Got {feature_mode!r}"
        )
    return np.column_stack((X[:, 0], second))


def _update(w, b, F, y, learning_rate):
    margins = y * (F @ w + b)
    active = margins < 1

    # hinge subgradient over samples inside the margin
    dw = -(y[active] @ F[active])
    db = -np.sum(y[active])

    dw = dw + w

    return w - learning_rate * dw, b - learning_rate * db


def step(model, X, y, learning_rate, feature_mode=FEATURE_LABEL):
    """Apply a single full-batch subgradient update and return the new model."""
    X, y = validate_xy(X, y)
    F = features(X, y, feature_mode)
    with np.errstate(over="ignore", invalid="ignore"):
        w, b = _update(model.w, float(model.b), F, y.astype(float), learning_rate)
    return LinearModel(float(w[0]), float(w[1]), float(b))


def fit(X, y, learning_rate, max_iterations, feature_mode=FEATURE_LABEL, progress=False):
    """
    Train a linear SVM with fixed-iteration subgradient descent.

    Starts from ``w = (0, 0)``, ``b = 0`` and runs exactly ``max_iterations``
    full-batch updates of the L2-regularized hinge loss. There is no
    convergence check and no learning-rate decay.

    Raises:
        ValueError: on an empty or malformed dataset, a non-positive
            learning rate or a negative iteration count.
        NumericOverflow: if any fitted parameter is not finite.
    """
    X, y = validate_xy(X, y)
    if not learning_rate > 0:
        raise ValueError(f"learning_rate must be positive. Got {learning_rate}")
    if (
        isinstance(max_iterations, bool)
        or not isinstance(max_iterations, Integral)
        or max_iterations < 0
    ):
        raise ValueError(
            f"max_iterations must be a non-negative integer. Got {max_iterations!r}"
        )

    F = features(X, y, feature_mode)
    labels = y.astype(float)

    w = np.zeros(2)
    b = 0.0

    iterations = tqdm(
        range(max_iterations), desc="Training", leave=False, disable=not progress
    )
    with np.errstate(over="ignore", invalid="ignore"):
        for _ in iterations:
            w, b = _update(w, b, F, labels, learning_rate)

    model = LinearModel(float(w[0]), float(w[1]), float(b))
    logger.info(
        "Fitted %d points in %d iterations: w=(%.6g, %.6g), b=%.6g",
        X.shape[0],
        max_iterations,
        model.w0,
        model.w1,
        model.b,
    )

    if not model.is_finite():
        raise NumericOverflow(model)
    return model


def accuracy(model, X, y, feature_mode=FEATURE_LABEL):
    X, y = validate_xy(X, y)
    return float(np.mean(model.predict(features(X, y, feature_mode)) == y))
