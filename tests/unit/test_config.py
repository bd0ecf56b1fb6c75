"""Unit tests for configuration management."""

import os
from unittest.mock import patch

import pytest

from ternexpand.core.config import TernExpandConfig, get_config, reload_config
from ternexpand.core.models import MarkerStyle


class TestTernExpandConfig:
    """Tests for TernExpandConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        # Clear env and disable .env file loading
        with patch.dict(os.environ, {}, clear=True):
            config = TernExpandConfig(_env_file=None)

            assert config.snippet_style == MarkerStyle.TEXTMATE
            assert config.trailing_noise_param == "context"
            assert config.strict is False
            assert config.api_host == "127.0.0.1"
            assert config.api_port == 8542
            assert config.log_level == "WARNING"

    def test_env_override(self) -> None:
        """Test environment variable override."""
        with patch.dict(
            os.environ,
            {
                "TERNEXPAND_SNIPPET_STYLE": "chocolat",
                "TERNEXPAND_STRICT": "true",
                "TERNEXPAND_API_PORT": "9000",
            },
        ):
            config = TernExpandConfig(_env_file=None)
            assert config.snippet_style == MarkerStyle.CHOCOLAT
            assert config.strict is True
            assert config.api_port == 9000

    def test_validation_style(self) -> None:
        """Test unknown marker style is rejected."""
        with patch.dict(os.environ, {"TERNEXPAND_SNIPPET_STYLE": "vim"}):
            with pytest.raises(ValueError):
                TernExpandConfig(_env_file=None)

    def test_validation_port(self) -> None:
        """Test port range validation."""
        with patch.dict(os.environ, {"TERNEXPAND_API_PORT": "0"}):
            with pytest.raises(ValueError):
                TernExpandConfig(_env_file=None)

        with patch.dict(os.environ, {"TERNEXPAND_API_PORT": "70000"}):
            with pytest.raises(ValueError):
                TernExpandConfig(_env_file=None)

    def test_validation_log_level(self) -> None:
        """Test log level validation."""
        with patch.dict(os.environ, {"TERNEXPAND_LOG_LEVEL": "LOUD"}):
            with pytest.raises(ValueError):
                TernExpandConfig(_env_file=None)


class TestConfigCaching:
    """Tests for configuration caching."""

    def test_get_config_cached(self) -> None:
        """Test that get_config returns cached instance."""
        reload_config()
        assert get_config() is get_config()

    def test_reload_config(self) -> None:
        """Test that reload_config picks up environment changes."""
        with patch.dict(os.environ, {"TERNEXPAND_TRAILING_NOISE_PARAM": "thisArg"}):
            config = reload_config()
            assert config.trailing_noise_param == "thisArg"
        reload_config()
