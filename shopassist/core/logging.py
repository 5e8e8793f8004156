# shopassist/core/logging.py
import logging
import sys
import colorlog

LOG_FORMAT = "%(log_color)s%(asctime)s %(levelname)-8s [%(name)s]%(reset)s %(message)s"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

# Third-party loggers and the level they are capped at.
# redis-py logs every reconnect attempt at INFO.
QUIET_LOGGERS = {
    "redis": logging.WARNING,
    "httpx": logging.WARNING,
}


def configure_logging(level: int | str = logging.INFO) -> None:
    """Colored stdout logging for the app and uvicorn; replaces any root handlers."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    handler = colorlog.StreamHandler(sys.stdout)
    handler.setFormatter(colorlog.ColoredFormatter(LOG_FORMAT, datefmt="%H:%M:%S", log_colors=LOG_COLORS))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [handler]

    for name in ("uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(level)
    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(max(level, quiet_level))
