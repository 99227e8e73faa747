"""
Logging setup
"""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"

def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach one console handler to the package logger"""
    logger = logging.getLogger("vacation_planner")
    logger.setLevel(level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.propagate = False
    return logger
