# tests/test_logging_config.py

import logging

from storefront.core.logging_config import build_logging_config, setup_logging


def test_sql_statements_are_quiet_by_default():
    config = build_logging_config("INFO")

    assert config["loggers"]["sqlalchemy.engine"]["level"] == "WARNING"
    assert config["loggers"]["storefront"]["level"] == "INFO"


def test_sql_echo_raises_engine_logger_to_info():
    config = build_logging_config("DEBUG", sql_echo=True)

    assert config["loggers"]["sqlalchemy.engine"]["level"] == "INFO"
    assert config["root"]["level"] == "DEBUG"


def test_setup_logging_applies_level():
    setup_logging("WARNING")
    try:
        assert logging.getLogger("storefront").level == logging.WARNING
    finally:
        setup_logging("INFO")
