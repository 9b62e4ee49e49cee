"""
Tests for logging configuration and settings.

Covers formatter output, request ID propagation and environment-driven
settings.
"""

import json
import logging
from typing import Iterator

import pytest
from pydantic import ValidationError

from customer_portal.config import Settings, settings
from customer_portal.logging_config import (
    HumanReadableFormatter,
    StructuredFormatter,
    clear_request_id,
    get_logger,
    get_request_id,
    set_request_id,
    setup_logging,
)


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Restore root logger handlers and level changed by setup_logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def make_record(message: str = "Guard check failed") -> logging.LogRecord:
    record = logging.LogRecord(
        name="customer_portal.guards",
        level=logging.DEBUG,
        pathname="guards.py",
        lineno=42,
        msg=message,
        args=(),
        exc_info=None,
    )
    record.extra_fields = {"check": "not_empty", "caption": "Name"}
    return record


class TestStructuredFormatter:
    def test_outputs_json_with_extra_fields(self):
        output = json.loads(StructuredFormatter().format(make_record()))

        assert output["level"] == "DEBUG"
        assert output["logger"] == "customer_portal.guards"
        assert output["message"] == "Guard check failed"
        assert output["check"] == "not_empty"
        assert output["caption"] == "Name"
        assert "request_id" not in output

    def test_includes_request_id(self):
        set_request_id("req-123")

        output = json.loads(StructuredFormatter().format(make_record()))

        assert output["request_id"] == "req-123"


class TestHumanReadableFormatter:
    def test_includes_level_and_fields(self):
        output = HumanReadableFormatter().format(make_record())

        assert "DEBUG" in output
        assert "[customer_portal.guards]" in output
        assert "Guard check failed" in output
        assert "check=not_empty" in output

    def test_includes_short_request_id(self):
        set_request_id("abcdef123456")

        output = HumanReadableFormatter().format(make_record())

        assert "[req:abcdef12]" in output


class TestRequestId:
    def test_generates_uuid_when_not_given(self):
        request_id = set_request_id()

        assert len(request_id) == 36
        assert get_request_id() == request_id

    def test_clear(self):
        set_request_id("req-1")
        clear_request_id()

        assert get_request_id() is None


class TestSetupLogging:
    def test_json_handler(self, restore_root_logger):
        logger = setup_logging(log_level="DEBUG", service_name="portal-test", use_json=True)

        root_logger = logging.getLogger()
        assert logger.name == "portal-test"
        assert logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, StructuredFormatter)
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_human_readable_handler(self, restore_root_logger):
        setup_logging(log_level="warning", service_name="portal-test", use_json=False)

        root_logger = logging.getLogger()
        assert root_logger.level == logging.WARNING
        assert isinstance(root_logger.handlers[0].formatter, HumanReadableFormatter)

    def test_get_logger_default_name(self):
        assert get_logger().name == settings.SERVICE_NAME
        assert get_logger("customer_portal.guards").name == "customer_portal.guards"


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in (
            "SERVICE_NAME",
            "LOG_LEVEL",
            "LOG_JSON",
            "LOG_GUARD_FAILURES",
            "RESPONSE_BODY_LOG_LIMIT",
        ):
            monkeypatch.delenv(name, raising=False)

        config = Settings(_env_file=None)

        assert config.SERVICE_NAME == "customer-portal"
        assert config.LOG_LEVEL == "INFO"
        assert config.LOG_JSON is False
        assert config.LOG_GUARD_FAILURES is True
        assert config.RESPONSE_BODY_LOG_LIMIT == 500

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_JSON", "true")
        monkeypatch.setenv("RESPONSE_BODY_LOG_LIMIT", "100")

        config = Settings(_env_file=None)

        assert config.LOG_LEVEL == "DEBUG"
        assert config.LOG_JSON is True
        assert config.RESPONSE_BODY_LOG_LIMIT == 100

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "VERBOSE")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_blank_service_name(self, monkeypatch):
        monkeypatch.setenv("SERVICE_NAME", "   ")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
