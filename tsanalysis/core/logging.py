"""Logging setup shared by scripts and the analysis package."""
import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", name: str = "tsanalysis") -> logging.Logger:
    """
    Configure a stream handler on the named logger and return it.

    Calling this more than once only updates the level; handlers are not duplicated.

    Args:
        level: Log level name ("DEBUG", "INFO", "WARNING", "ERROR")
        name: Logger name, "tsanalysis" covers every module in the package

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger
