"""
Tests for settings and logging configuration.
"""

from datetime import date

import pytest
import structlog
from pydantic import ValidationError

from services.personnummer.log_config import configure_logging, get_logger
from services.personnummer.settings import Settings, get_settings, settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run each test without PERSONNUMMER_* variables or a .env file."""
    for name in (
        "PERSONNUMMER_REFERENCE_DATE",
        "PERSONNUMMER_LOG_LEVEL",
        "PERSONNUMMER_LOG_FORMAT",
        "PERSONNUMMER_ENVIRONMENT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        """Test default values."""
        config = Settings()
        assert config.reference_date is None
        assert config.log_level == "INFO"
        assert config.log_format == "text"
        assert config.service_name == "personnummer"
        assert config.environment == "development"

    def test_reads_prefixed_env(self, monkeypatch):
        """Test that PERSONNUMMER_ variables are loaded and converted."""
        monkeypatch.setenv("PERSONNUMMER_REFERENCE_DATE", "2018-01-04")
        monkeypatch.setenv("PERSONNUMMER_LOG_LEVEL", "debug")
        monkeypatch.setenv("PERSONNUMMER_LOG_FORMAT", "JSON")
        config = Settings()
        assert config.reference_date == date(2018, 1, 4)
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_reads_env_file(self, tmp_path):
        """Test that a .env file in the working directory is used."""
        (tmp_path / ".env").write_text("PERSONNUMMER_REFERENCE_DATE=2018-01-04\n")
        assert Settings().reference_date == date(2018, 1, 4)

    @pytest.mark.parametrize(
        "name,value",
        [
            ("PERSONNUMMER_LOG_LEVEL", "VERBOSE"),
            ("PERSONNUMMER_LOG_FORMAT", "xml"),
            ("PERSONNUMMER_ENVIRONMENT", "qa"),
            ("PERSONNUMMER_REFERENCE_DATE", "not-a-date"),
        ],
        ids=["log_level", "log_format", "environment", "reference_date"],
    )
    def test_invalid_values(self, monkeypatch, name, value):
        """Test that invalid values are rejected."""
        monkeypatch.setenv(name, value)
        with pytest.raises(ValidationError):
            Settings()

    def test_settings_are_cached(self):
        """Test that settings() returns the cached instance."""
        assert settings() is settings()


class TestLogConfig:
    """Tests for logging configuration."""

    @pytest.mark.parametrize("log_format", ["json", "text"])
    def test_configure_logging(self, log_format):
        """Test that structlog is configured with the selected renderer."""
        configure_logging("DEBUG", log_format)
        processors = structlog.get_config()["processors"]
        renderer = processors[-1]
        if log_format == "json":
            assert isinstance(renderer, structlog.processors.JSONRenderer)
        else:
            assert isinstance(renderer, structlog.dev.ConsoleRenderer)

    def test_get_logger(self):
        """Test that a usable logger is returned."""
        configure_logging()
        logger = get_logger("personnummer.test")
        logger.info("Logger works", key="value")
