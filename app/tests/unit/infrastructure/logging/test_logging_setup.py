"""Unit tests for infrastructure.logging.setup module."""

import logging

import pytest
import structlog

from infrastructure.logging import setup
from infrastructure.logging.setup import configure_logging, get_module_logger


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging()."""

    def test_detects_test_environment(self):
        assert setup._is_test_environment() is True

    def test_suppresses_output_under_pytest(self, mock_settings):
        configure_logging(settings=mock_settings)
        assert logging.root.level > logging.CRITICAL

    def test_returns_bound_logger(self, mock_settings):
        logger = configure_logging(settings=mock_settings)
        assert hasattr(logger, "info")

    def test_production_uses_json_renderer(self, mock_settings, monkeypatch):
        monkeypatch.setattr(setup, "_is_test_environment", lambda: False)
        try:
            configure_logging(settings=mock_settings, is_production=True)
            processors = structlog.get_config()["processors"]
            assert isinstance(processors[-1], structlog.processors.JSONRenderer)
            assert structlog.contextvars.merge_contextvars in processors
        finally:
            monkeypatch.undo()
            configure_logging()

    def test_development_uses_console_renderer(self, mock_settings, monkeypatch):
        monkeypatch.setattr(setup, "_is_test_environment", lambda: False)
        try:
            configure_logging(settings=mock_settings, is_production=False)
            processors = structlog.get_config()["processors"]
            assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        finally:
            monkeypatch.undo()
            configure_logging()


@pytest.mark.unit
class TestGetModuleLogger:
    def test_binds_calling_module(self):
        context = structlog.get_context(get_module_logger())
        assert context["module_path"] == __name__
        assert context["component"] == __name__.split(".")[-1]
