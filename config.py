"""
Run configuration for the SVM visualizer.

Module constants hold the defaults; ``SVMConfig`` bundles them for a single
run so callers (and tests) can override any of them.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from geometry import Viewport


NUM_POINTS = 100

WINDOW_WIDTH = 640
WINDOW_HEIGHT = 480

POINT_SIZE = 10
MARGIN_WIDTH = 40
DASH_LENGTH = 10

LEARNING_RATE = 0.01
MAX_ITERATIONS = 1000

HOLD_SECONDS = 5.0

# feature paired with w1 in the update rule
FEATURE_LABEL = "label"
FEATURE_COORDINATE = "coordinate"
FEATURE_MODES = (FEATURE_LABEL, FEATURE_COORDINATE)

Color = Tuple[int, int, int]

BACKGROUND_COLOR: Color = (255, 255, 255)
POSITIVE_COLOR: Color = (255, 0, 0)
NEGATIVE_COLOR: Color = (0, 0, 255)
BOUNDARY_COLOR: Color = (0, 255, 0)
MARGIN_COLOR: Color = (0, 0, 0)


@dataclass(frozen=True)
class SVMConfig:
    num_points: int = NUM_POINTS
    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    point_size: int = POINT_SIZE
    margin_width: float = MARGIN_WIDTH
    dash_length: float = DASH_LENGTH
    learning_rate: float = LEARNING_RATE
    max_iterations: int = MAX_ITERATIONS
    hold_seconds: float = HOLD_SECONDS
    feature_mode: str = FEATURE_LABEL
    seed: Optional[int] = None
    title: str = "SVM Visualization"

    def __post_init__(self):
        if self.num_points <= 0 or self.num_points % 2:
            raise ValueError(
                f"num_points must be a positive even number. Got {self.num_points}"
            )
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Window size must be positive. Got {self.width}x{self.height}"
            )
        if self.feature_mode not in FEATURE_MODES:
            raise ValueError(
                f"feature_mode must be one of {FEATURE_MODES}. Got {self.feature_mode!r}"
            )

    @property
    def viewport(self) -> Viewport:
        return Viewport(self.width, self.height)
