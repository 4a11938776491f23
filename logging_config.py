"""Console (and optional file) logging for the svm_visualizer modules."""
import logging
import sys
from typing import Optional


LOGGER_NAME = "svm_visualizer"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(module_name: str) -> logging.Logger:
    """Logger for a flat module, nested under ``svm_visualizer``."""
    return logging.getLogger(LOGGER_NAME).getChild(module_name)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Route svm_visualizer records to stdout and, if given, to ``log_file``.

    Calling it again replaces the handlers from the previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %d handler(s) at level %s", len(handlers), level)
