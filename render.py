"""
Matplotlib drawing surface with a pixel coordinate system.

The axes span ``[0, width] x [0, height]`` with the y axis pointing down, so
callers draw in the same screen space the geometry module produces.
"""
from typing import Sequence, Tuple

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from logging_config import get_logger


logger = get_logger(__name__)

Color = Tuple[int, int, int]
Rect = Tuple[float, float, float, float]


def to_mpl_color(color: Color) -> Tuple[float, float, float]:
    return tuple(channel / 255.0 for channel in color)


class MatplotlibSurface:
    def __init__(self, width: int, height: int, title: str = "", dpi: int = 100):
        self.width = width
        self.height = height

        self.fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        if title and self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title(title)

        # axes fill the whole figure so one unit is one pixel
        self.ax = self.fig.add_axes((0, 0, 1, 1))
        self._reset_axes()
        logger.debug("Opened %dx%d surface", width, height)

    def _reset_axes(self):
        self.ax.set_xlim(0, self.width)
        self.ax.set_ylim(self.height, 0)
        self.ax.set_axis_off()

    def clear(self, color: Color) -> None:
        self.ax.clear()
        self._reset_axes()
        self.fig.patch.set_facecolor(to_mpl_color(color))

    def fill_rect(self, rect: Rect, color: Color) -> None:
        x, y, w, h = rect
        self.ax.add_patch(
            Rectangle((x, y), w, h, facecolor=to_mpl_color(color), edgecolor="none")
        )

    def draw_line(self, p1: Sequence[float], p2: Sequence[float], color: Color) -> None:
        self.ax.plot(
            (p1[0], p2[0]), (p1[1], p2[1]), color=to_mpl_color(color), linewidth=1
        )

    def present(self) -> None:
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

    def hold(self, duration: float) -> None:
        if duration > 0:
            plt.pause(duration)

    def close(self) -> None:
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            logger.debug("Closed surface")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
