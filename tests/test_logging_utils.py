"""Tests for stagenote.logging_utils module."""

import logging
import sys

from stagenote.logging_utils import (
    DEBUG_LOG_FORMAT,
    LOG_FORMAT,
    configure_logging,
    verbosity_to_level,
)


class TestVerbosityToLevel:
    """Tests for verbosity_to_level function."""

    def test_levels(self):
        """Test the verbosity ladder."""
        assert verbosity_to_level(-1) == logging.WARNING
        assert verbosity_to_level(0) == logging.WARNING
        assert verbosity_to_level(1) == logging.INFO
        assert verbosity_to_level(2) == logging.DEBUG
        assert verbosity_to_level(5) == logging.DEBUG


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_calls_basic_config(self, mocker):
        """Test that the root logger is configured with the mapped level."""
        mock_basic = mocker.patch("logging.basicConfig")

        configure_logging(1)

        mock_basic.assert_called_once()
        assert mock_basic.call_args.kwargs["level"] == logging.INFO

    def test_logs_to_stderr(self, mocker):
        """Test that records never go to stdout."""
        mock_basic = mocker.patch("logging.basicConfig")

        configure_logging(0)

        assert mock_basic.call_args.kwargs["stream"] is sys.stderr
        assert mock_basic.call_args.kwargs["format"] == LOG_FORMAT

    def test_debug_format(self, mocker):
        """Test that -vv switches to the detailed format."""
        mock_basic = mocker.patch("logging.basicConfig")

        configure_logging(3)

        assert mock_basic.call_args.kwargs["level"] == logging.DEBUG
        assert mock_basic.call_args.kwargs["format"] == DEBUG_LOG_FORMAT
