"""Global configuration for ternexpand.

This module provides centralized configuration management with support for
environment variables and sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from ternexpand.core.models import MarkerStyle


class TernExpandConfig(BaseSettings):
    """ternexpand configuration settings.

    Values can be overridden via environment variables with TERNEXPAND_ prefix.
    Example: TERNEXPAND_SNIPPET_STYLE=chocolat overrides snippet_style.
    """

    # Snippet rendering
    snippet_style: MarkerStyle = Field(
        default=MarkerStyle.TEXTMATE,
        description="Tabstop marker syntax used in generated snippets",
    )
    trailing_noise_param: str = Field(
        default="context",
        description="Trailing parameter name dropped from snippets (empty disables)",
    )

    # Error policy
    strict: bool = Field(
        default=False,
        description="Raise on structurally malformed signatures instead of returning no snippet",
    )

    # HTTP API
    api_host: str = Field(
        default="127.0.0.1",
        description="Bind host for the HTTP API",
    )
    api_port: int = Field(
        default=8542,
        ge=1,
        le=65535,
        description="Bind port for the HTTP API",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Log level applied by the CLI",
    )

    model_config = {
        "env_prefix": "TERNEXPAND_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_config() -> TernExpandConfig:
    """Get cached configuration instance.

    Returns:
        TernExpandConfig singleton instance.
    """
    return TernExpandConfig()


def reload_config() -> TernExpandConfig:
    """Reload configuration (clears cache).

    Returns:
        Fresh TernExpandConfig instance.
    """
    get_config.cache_clear()
    return get_config()
