import logging

import config
from config import SVMConfig
from generate_dataset_2d import generate_dataset
from geometry import (
    DegenerateModel,
    boundary_segment,
    clip_segment,
    dash,
    margin_segments,
)
from logging_config import get_logger, setup_logging
from render import MatplotlibSurface
from svm import NumericOverflow, accuracy, fit


logger = get_logger(__name__)


def draw_points(surface, dataset, point_size):
    half = point_size / 2
    for (x, y), label in zip(dataset.X, dataset.y):
        color = config.POSITIVE_COLOR if label > 0 else config.NEGATIVE_COLOR
        surface.fill_rect((x - half, y - half, point_size, point_size), color)


def draw_lines(surface, model, cfg):
    viewport = cfg.viewport
    boundary = boundary_segment(model, viewport)
    margins = margin_segments(model, viewport, cfg.margin_width)

    surface.draw_line(boundary.start, boundary.end, config.BOUNDARY_COLOR)
    for margin in margins:
        # dash only the visible part so steep margins stay cheap
        visible = clip_segment(margin, viewport)
        if visible is None:
            continue
        for stroke in dash(visible, cfg.dash_length):
            surface.draw_line(stroke.start, stroke.end, config.MARGIN_COLOR)


def draw_scene(surface, dataset, model, cfg):
    """Draw the points and, when the model allows it, boundary and margins.

    Returns True if the lines were drawn.
    """
    surface.clear(config.BACKGROUND_COLOR)
    draw_points(surface, dataset, cfg.point_size)

    if model is None:
        logger.warning("No usable model, drawing points only")
        return False

    try:
        draw_lines(surface, model, cfg)
    except DegenerateModel as exc:
        logger.warning("Skipping decision boundary: %s", exc)
        return False
    return True


def run(cfg=None, surface_factory=MatplotlibSurface):
    cfg = cfg or SVMConfig()

    dataset = generate_dataset(cfg.num_points, cfg.width, cfg.height, seed=cfg.seed)

    try:
        model = fit(
            dataset.X,
            dataset.y,
            cfg.learning_rate,
            cfg.max_iterations,
            feature_mode=cfg.feature_mode,
        )
    except NumericOverflow as exc:
        logger.error("%s", exc)
        model = None

    with surface_factory(cfg.width, cfg.height, cfg.title) as surface:
        draw_scene(surface, dataset, model, cfg)
        surface.present()
        surface.hold(cfg.hold_seconds)

    return dataset, model


def main():
    setup_logging(logging.INFO)

    cfg = SVMConfig()
    dataset, model = run(cfg)

    if model is not None:
        acc = accuracy(model, dataset.X, dataset.y, cfg.feature_mode)
        print(f"Training accuracy: {acc * 100:.2f}%")


if __name__ == "__main__":
    main()
