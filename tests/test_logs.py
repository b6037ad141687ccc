"""Tests for structured logging and runtime settings."""

from __future__ import annotations

import json
import logging
import sys

from extraction.logs import LOGGER_NAME, StructuredFormatter, configure_logging
from extraction.settings import Settings


class TestStructuredFormatter:
    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord(
            name=LOGGER_NAME,
            level=logging.DEBUG,
            pathname=__file__,
            lineno=1,
            msg="matched %s",
            args=("target",),
            exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_basic_fields(self) -> None:
        data = json.loads(StructuredFormatter().format(self._record()))
        assert data["level"] == "DEBUG"
        assert data["logger"] == LOGGER_NAME
        assert data["message"] == "matched target"
        assert "selector" not in data

    def test_extra_fields(self) -> None:
        record = self._record(selector="div", matches=3, unrelated="x")
        data = json.loads(StructuredFormatter().format(record))
        assert data["selector"] == "div"
        assert data["matches"] == 3
        assert "unrelated" not in data

    def test_timestamp_is_utc_iso8601(self) -> None:
        data = json.loads(StructuredFormatter().format(self._record()))
        assert data["timestamp"].endswith("+00:00")

    def test_exception_included(self) -> None:
        try:
            raise ValueError("boom")
        except ValueError:
            record = self._record()
            record.exc_info = sys.exc_info()
        data = json.loads(StructuredFormatter().format(record))
        assert "ValueError: boom" in data["exception"]


class TestConfigureLogging:
    def test_handler_added_once(self) -> None:
        logger = configure_logging("warning")
        configure_logging(logging.WARNING)
        structured = [h for h in logger.handlers if isinstance(h.formatter, StructuredFormatter)]
        assert len(structured) == 1
        assert logger.level == logging.WARNING
        assert logger.propagate is False


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("STRIP_TAGS_PARSER", raising=False)
        monkeypatch.delenv("STRIP_TAGS_LOG_LEVEL", raising=False)
        settings = Settings()
        assert settings.parser == "lxml"
        assert settings.log_level is None

    def test_environment_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("STRIP_TAGS_PARSER", "html.parser")
        monkeypatch.setenv("STRIP_TAGS_LOG_LEVEL", "DEBUG")
        settings = Settings()
        assert settings.parser == "html.parser"
        assert settings.log_level == "DEBUG"
