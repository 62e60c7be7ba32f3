"""
Logging setup.

Log records go to stderr so they never mix with command results on stdout.
"""

import logging
import logging.config
from pathlib import Path


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> logging.Logger:
    """
    Configure the `wordbook` logger tree.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file that receives the same records as the console

    Returns:
        The root `wordbook` logger
    """
    level = level.upper()
    if level not in logging.getLevelNamesMapping():
        level = "WARNING"

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "console",
            "level": level,
            "stream": "ext://sys.stderr",
        }
    }

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": str(path),
            "formatter": "console",
            "level": level,
            "mode": "a",
            "encoding": "utf-8",
        }

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "loggers": {
            "wordbook": {
                "handlers": list(handlers.keys()),
                "level": level,
                "propagate": False,
            },
        },
    })

    return logging.getLogger("wordbook")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
