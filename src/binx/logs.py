from __future__ import annotations

import logging

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def setup_logging(log_file: str | None, level: str = "WARNING") -> logging.Logger:
    """Configure the `binx` logger.

    Output goes to `log_file` only; the terminal belongs to the UI. Without a
    file the logger gets a NullHandler.
    """
    logger = logging.getLogger("binx")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level.upper())
    logger.propagate = False
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT, "%Y-%m-%d %H:%M:%S"))
    else:
        handler = logging.NullHandler()
    logger.addHandler(handler)
    return logger
