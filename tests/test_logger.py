"""Tests for the package logger."""
import importlib
import logging

import japchar
import japchar.logger
from japchar.logger import resolve_level


class TestLogger:
    """Test logger configuration."""

    def test_does_not_propagate_to_root(self):
        """Test records are not handed to the application's root logger."""
        assert japchar.logger.logger.propagate is False

    def test_resolve_level(self):
        """Test level names resolve case-insensitively and unknown names give None."""
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level("WARNING") == logging.WARNING
        assert resolve_level("verbose") is None

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        """Test an unknown JAPCHAR_LOG_LEVEL keeps the package importable at INFO."""
        monkeypatch.setenv("JAPCHAR_LOG_LEVEL", "verbose")
        try:
            importlib.reload(japchar)
            module = importlib.reload(japchar.logger)
            assert japchar.LOG_LEVEL == "VERBOSE"
            assert module.logger.level == logging.INFO
            assert len(module.logger.handlers) == 2
        finally:
            monkeypatch.undo()
            importlib.reload(japchar)
            importlib.reload(japchar.logger)

    def test_known_level_is_applied(self, monkeypatch):
        """Test a valid JAPCHAR_LOG_LEVEL sets the logger level."""
        monkeypatch.setenv("JAPCHAR_LOG_LEVEL", "debug")
        try:
            importlib.reload(japchar)
            module = importlib.reload(japchar.logger)
            assert module.logger.level == logging.DEBUG
        finally:
            monkeypatch.undo()
            importlib.reload(japchar)
            importlib.reload(japchar.logger)
