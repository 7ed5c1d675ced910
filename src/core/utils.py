# core/utils.py
import logging
import math

# Absolute tolerance for every float comparison in the tracer.
EPSILON = 0.0035
PI = math.pi

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def equal(a: float, b: float) -> bool:
    """
    Compares two floats with the global EPSILON tolerance.
    """
    return abs(a - b) < EPSILON


def radians(deg: float) -> float:
    return deg / 180.0 * PI


def reflect(v, n):
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def get_logger(name: str = __name__, level: int = logging.INFO) -> logging.Logger:
    """
    Returns a logger with a single stream handler attached.
    Repeated calls for the same name reuse the existing handler.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger


def set_log_level(level: str) -> None:
    """Applies a level name (DEBUG, INFO, ...) to every logger handed out so far."""
    value = getattr(logging, level.upper(), logging.INFO)
    for logger in logging.root.manager.loggerDict.values():
        if isinstance(logger, logging.Logger) and logger.handlers:
            logger.setLevel(value)
