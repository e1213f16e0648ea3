# expense_history/utilities/config_logging.py
from __future__ import annotations

import copy
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional

LOGGING: Dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "verbose",
            "filename": "logs/app.log",
            "maxBytes": 5_000_000,
            "backupCount": 5,
            "encoding": "utf-8",
        },
    },
    "loggers": {
        # root logger
        "": {
            "level": "DEBUG",
            "handlers": ["console", "file"],
        },
        # matplotlib is chatty at DEBUG (font manager)
        "matplotlib": {"level": "WARNING", "propagate": True},
        "PIL": {"level": "WARNING", "propagate": True},
    },
}


def configure_logging(
    level: Optional[str] = None, log_dir: Optional[Path] = None
) -> Dict[str, Any]:
    """Apply ``LOGGING`` after making sure the rotating file's folder exists.

    ``level`` overrides the console handler level; ``log_dir`` relocates
    ``app.log``. Returns the dictionary that was applied.
    """
    cfg = copy.deepcopy(LOGGING)
    file_handler = cfg["handlers"]["file"]
    target = Path(log_dir) / "app.log" if log_dir else Path(file_handler["filename"])
    target.parent.mkdir(parents=True, exist_ok=True)
    file_handler["filename"] = str(target)
    if level:
        cfg["handlers"]["console"]["level"] = level.upper()
    logging.config.dictConfig(cfg)
    return cfg
