# fitcheck/core/logging.py
import logging
import logging.config
from typing import Any, Dict

from fitcheck.core.config import settings

LOG_FORMAT = 'timestamp="%(asctime)s" logger="%(name)s" level="%(levelname)s" msg="%(message)s"'

def build_logging_config(level: str | None = None) -> Dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {"format": LOG_FORMAT},
        },
        "handlers": {
            "console": {
                "level": "DEBUG",
                "class": "logging.StreamHandler",
                "formatter": "console",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level or settings.LOG_LEVEL,
        },
        "loggers": {
            # SQL de cada request só em debug explícito
            "sqlalchemy.engine": {"level": "WARNING"},
        },
    }

def setup_logging(level: str | None = None) -> None:
    logging.config.dictConfig(build_logging_config(level))
