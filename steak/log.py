import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging_to_console(level: str | int = logging.INFO, logger: logging.Logger | None = None):
    """Attach a stderr handler to the package logger."""
    logger = logger or logging.getLogger("steak")
    logger.setLevel(level)

    # Calling twice must not duplicate every line.
    for handler in logger.handlers:
        if getattr(handler, "_steak_console", False):
            handler.setLevel(level)
            return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._steak_console = True
    logger.addHandler(handler)
    return logger
