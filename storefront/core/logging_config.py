# storefront/core/logging_config.py

from logging.config import dictConfig
from typing import Optional

from storefront.core.config import settings


def build_logging_config(level: str, sql_echo: bool = False) -> dict:
    """dictConfig schema: one stdout handler shared by the server, the app and SQLAlchemy."""
    console_logger = {"handlers": ["console"], "level": level, "propagate": False}
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "uvicorn": dict(console_logger),
            "fastapi": dict(console_logger),
            "storefront": dict(console_logger),
            # INFO on this logger prints every statement
            "sqlalchemy.engine": {**console_logger, "level": "INFO" if sql_echo else "WARNING"},
        },
        "root": {"level": level, "handlers": ["console"]},
    }


def setup_logging(level: Optional[str] = None):
    dictConfig(build_logging_config(level or settings.LOG_LEVEL, sql_echo=settings.SQL_ECHO))
