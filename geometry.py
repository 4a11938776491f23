"""
Maps a fitted linear model to screen-space line segments.

Model space is centered on the window: ``x`` runs from ``-W/2`` to ``W/2``.
Screen space has its origin at the top-left corner, so every model point is
translated by ``(W/2, H/2)``.
"""
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from logging_config import get_logger


logger = get_logger(__name__)

Point = Tuple[float, float]


class DegenerateModel(ValueError):
    """The model has no drawable boundary (``w1 == 0`` or non-finite values)."""


@dataclass(frozen=True)
class Viewport:
    width: int
    height: int


@dataclass(frozen=True)
class LineSegment:
    start: Point
    end: Point

    @property
    def length(self) -> float:
        return math.hypot(self.end[0] - self.start[0], self.end[1] - self.start[1])


def _check_model(model) -> None:
    values = (model.w0, model.w1, model.b)
    if not all(math.isfinite(v) for v in values):
        raise DegenerateModel(f"Model has non-finite parameters: {values}")
    if model.w1 == 0:
        raise DegenerateModel("w1 is zero, the boundary cannot be solved for y")


def _segment(model, viewport: Viewport, bias: float) -> LineSegment:
    half_w = viewport.width / 2
    half_h = viewport.height / 2

    def solve(x):
        return -(model.w0 * x + bias) / model.w1

    x1, x2 = -half_w, half_w
    y1, y2 = solve(x1), solve(x2)
    if not (math.isfinite(y1) and math.isfinite(y2)):
        raise DegenerateModel(f"Boundary is not finite for w1={model.w1}")

    segment = LineSegment((x1 + half_w, y1 + half_h), (x2 + half_w, y2 + half_h))
    if not math.isfinite(segment.length):
        raise DegenerateModel(f"Boundary is too steep to draw for w1={model.w1}")
    return segment


def boundary_segment(model, viewport: Viewport) -> LineSegment:
    """Screen segment of ``w0*x + w1*y + b = 0`` across the viewport width."""
    _check_model(model)
    return _segment(model, viewport, model.b)


def margin_segment(model, viewport: Viewport, offset: float) -> LineSegment:
    """
    Boundary shifted in model space by replacing ``b`` with ``b + offset``.

    A positive ``offset`` gives the upper margin line, a negative one the
    lower. The shift is not corrected for aspect ratio.
    """
    _check_model(model)
    return _segment(model, viewport, model.b + offset)


def margin_segments(
    model, viewport: Viewport, offset: float
) -> Tuple[LineSegment, LineSegment]:
    return (
        margin_segment(model, viewport, offset),
        margin_segment(model, viewport, -offset),
    )


def dash(segment: LineSegment, dash_length: float) -> List[LineSegment]:
    """
    Split ``segment`` into ``floor(length / dash_length)`` equal pieces and
    keep the even-indexed ones.

    A segment shorter than one dash yields an empty list.
    """
    if not dash_length > 0:
        raise ValueError(f"dash_length must be positive. Got {dash_length}")

    dash_count = int(segment.length // dash_length)
    if dash_count == 0:
        logger.debug("Segment of length %.3f is shorter than one dash", segment.length)
        return []

    (x1, y1), (x2, y2) = segment.start, segment.end
    dx, dy = x2 - x1, y2 - y1

    def at(i):
        t = i / dash_count
        return (x1 + t * dx, y1 + t * dy)

    return [LineSegment(at(i), at(i + 1)) for i in range(0, dash_count, 2)]


def clip_segment(segment: LineSegment, viewport: Viewport) -> Optional[LineSegment]:
    """
    Part of ``segment`` inside ``[0, W] x [0, H]`` (Liang-Barsky), or None
    when the segment misses the viewport.
    """
    (x1, y1), (x2, y2) = segment.start, segment.end
    dx, dy = x2 - x1, y2 - y1

    t0, t1 = 0.0, 1.0
    for p, q in (
        (-dx, x1),
        (dx, viewport.width - x1),
        (-dy, y1),
        (dy, viewport.height - y1),
    ):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            t0 = max(t0, t)
        else:
            t1 = min(t1, t)
        if t0 > t1:
            return None

    return LineSegment((x1 + t0 * dx, y1 + t0 * dy), (x1 + t1 * dx, y1 + t1 * dy))
