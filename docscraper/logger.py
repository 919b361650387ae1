# docscraper/logger.py

import logging

import colorlog

LOG_FORMAT = "%(log_color)s%(asctime)s [%(levelname)s]%(reset)s %(name)s: %(message)s"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def setup_logger(name: str = "docscraper", level: int = logging.INFO) -> logging.Logger:
    """
    Configure the package logger with a coloured console handler.
    Calling it again only updates the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = colorlog.StreamHandler()
    handler.setFormatter(
        colorlog.ColoredFormatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S", log_colors=LOG_COLORS)
    )
    logger.addHandler(handler)
    logger.propagate = False
    return logger


logger = setup_logger()
