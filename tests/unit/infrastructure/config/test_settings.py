"""Tests for the application settings."""

import logging
import warnings
from collections.abc import Generator
from datetime import timedelta

import pytest
from pydantic import ValidationError

from mailsrs.infrastructure.config import Settings, get_settings
from mailsrs.infrastructure.logging import configure_logging


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the default engine configuration."""
        monkeypatch.setenv("SRS_SECRET_KEY", "aSecretKey")

        settings = Settings(_env_file=None)
        options = settings.to_srs_options()

        assert settings.srs_secret_key == "aSecretKey"
        assert options.lifetime == timedelta(days=30)
        assert options.separator == "="
        assert options.hash_length == 4
        assert options.hash_min == 4
        assert options.always_rewrite is False
        assert options.try_verify_srs1_time is False
        assert options.disable_timestamp_validation is False

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test reading every SRS option from the environment."""
        monkeypatch.setenv("SRS_SECRET_KEY", "anotherKey")
        monkeypatch.setenv("SRS_LIFETIME_DAYS", "7")
        monkeypatch.setenv("SRS_ALWAYS_REWRITE", "true")
        monkeypatch.setenv("SRS_SEPARATOR", "+")
        monkeypatch.setenv("SRS_HASH_LENGTH", "20")
        monkeypatch.setenv("SRS_HASH_MIN", "8")
        monkeypatch.setenv("SRS_TRY_VERIFY_SRS1_TIME", "1")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)
        options = settings.to_srs_options()

        assert options.lifetime == timedelta(days=7)
        assert options.always_rewrite is True
        assert options.separator == "+"
        assert options.hash_length == 20
        assert options.hash_min == 8
        assert options.try_verify_srs1_time is True
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("separator", ["_", "==", ""])
    def test_invalid_separator(self, separator: str) -> None:
        """Test that only '=', '+' and '-' are accepted."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, srs_separator=separator)

    def test_invalid_log_level(self) -> None:
        """Test that an unknown log level is rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="VERBOSE")

    @pytest.mark.parametrize(
        ("field", "value"),
        [("srs_lifetime_days", 0), ("srs_hash_length", 29), ("srs_hash_min", 0)],
    )
    def test_out_of_range(self, field: str, value: int) -> None:
        """Test numeric bounds."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: value})

    def test_missing_secret_key_warns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the warning when no secret key is configured."""
        monkeypatch.delenv("SRS_SECRET_KEY", raising=False)

        with pytest.warns(UserWarning, match="SRS_SECRET_KEY"):
            Settings(_env_file=None)

    def test_disabled_timestamp_validation_warns(self) -> None:
        """Test the warning when timestamp validation is disabled."""
        with pytest.warns(UserWarning, match="timestamp validation is disabled"):
            settings = Settings(
                _env_file=None, srs_disable_timestamp_validation=True
            )

        assert settings.to_srs_options().disable_timestamp_validation is True

    def test_no_warning_when_configured(self) -> None:
        """Test that a configured key does not warn."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            Settings(_env_file=None, srs_secret_key="aSecretKey")

    def test_get_settings_is_cached(self) -> None:
        """Test the settings singleton."""
        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Test cases for configure_logging."""

    @pytest.fixture(autouse=True)
    def restore_logger(self) -> Generator[None, None, None]:
        """Restore the package logger after each test."""
        logger = logging.getLogger("mailsrs")
        level, handlers = logger.level, list(logger.handlers)
        yield
        logger.setLevel(level)
        logger.handlers[:] = handlers

    def test_level_from_settings(self) -> None:
        """Test that the level comes from the settings."""
        logger = configure_logging(
            Settings(_env_file=None, srs_secret_key="k", log_level="WARNING")
        )

        assert logger.name == "mailsrs"
        assert logger.level == logging.WARNING

    def test_debug_mode(self) -> None:
        """Test that debug mode forces the DEBUG level."""
        logger = configure_logging(
            Settings(_env_file=None, srs_secret_key="k", debug=True)
        )

        assert logger.level == logging.DEBUG

    def test_single_handler(self) -> None:
        """Test that configuring twice does not duplicate handlers."""
        settings = Settings(_env_file=None, srs_secret_key="k")
        logging.getLogger("mailsrs").handlers.clear()

        configure_logging(settings)
        logger = configure_logging(settings)

        assert len(logger.handlers) == 1
