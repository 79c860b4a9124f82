"""Tests for structlog configuration helpers."""

import logging

import pytest
import structlog

from easyhttp.config import LoggingConfig
from easyhttp.logging_config import (
    add_timestamp,
    get_logger,
    setup_logging,
    setup_logging_from_config,
)


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestSetupLogging:
    """Test global logging configuration."""

    @pytest.mark.parametrize("log_format", ["json", "console"])
    def test_configures_structlog(self, log_format):
        setup_logging("INFO", log_format)

        assert structlog.is_configured()
        renderer = structlog.get_config()["processors"][-1]
        if log_format == "json":
            assert isinstance(renderer, structlog.processors.JSONRenderer)
        else:
            assert isinstance(renderer, structlog.dev.ConsoleRenderer)

    def test_quiets_httpx_outside_debug(self):
        setup_logging("INFO", "json")

        assert logging.getLogger("httpx").level == logging.WARNING

    def test_from_config(self):
        setup_logging_from_config(LoggingConfig(level="DEBUG", format="json"))

        assert structlog.is_configured()


def test_add_timestamp():
    event = add_timestamp(None, "info", {"event": "x"})

    assert event["timestamp"].endswith("Z")


def test_get_logger_returns_structlog_logger():
    logger = get_logger("easyhttp.tests")

    assert hasattr(logger, "warning")
