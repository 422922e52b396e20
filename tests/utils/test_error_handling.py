#!/usr/bin/env python3
"""
Tests for Error Handling Utility Module
"""

import logging
from unittest.mock import MagicMock

import pytest

from devinsights.utils.error_handling import log_and_continue, log_and_return_default


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing log calls."""
    return MagicMock(spec=logging.Logger)


class TestLogAndContinue:
    """Test suite for log_and_continue() function."""

    def test_logs_at_warning_level(self, mock_logger):
        """Test that log_and_continue logs at WARNING level."""
        log_and_continue(mock_logger, ValueError("bad date"), {"date": "x"}, "Date parsing")

        mock_logger.warning.assert_called_once()
        message = mock_logger.warning.call_args[0][0]
        assert "Date parsing failed" in message
        assert "bad date" in message

    def test_includes_structured_context(self, mock_logger):
        """Test that structured context is included in log extra."""
        log_and_continue(mock_logger, ValueError("bad"), {"series_key": "team_a"}, "Date parsing")

        extra = mock_logger.warning.call_args[1]["extra"]
        assert extra["context"] == {"series_key": "team_a"}
        assert extra["exception_class"] == "ValueError"
        assert extra["error_type"] == "Date parsing"

    def test_returns_none(self, mock_logger):
        assert log_and_continue(mock_logger, ValueError("x"), {}) is None


class TestLogAndReturnDefault:
    """Test suite for log_and_return_default() function."""

    def test_returns_default(self, mock_logger):
        result = log_and_return_default(mock_logger, TypeError("x"), {"key": "prs"}, default_value=[])
        assert result == []

    def test_default_is_none(self, mock_logger):
        assert log_and_return_default(mock_logger, TypeError("x"), {}) is None

    def test_logs_default_value(self, mock_logger):
        log_and_return_default(mock_logger, ValueError("x"), {}, default_value=0, error_type="Value parsing")

        message = mock_logger.warning.call_args[0][0]
        extra = mock_logger.warning.call_args[1]["extra"]
        assert "returning default value" in message
        assert extra["default_value"] == "0"
