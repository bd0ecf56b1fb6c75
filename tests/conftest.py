"""Shared pytest fixtures for ternexpand tests."""

import os
from unittest.mock import patch

import pytest
from hypothesis import settings

from ternexpand.core.config import TernExpandConfig

# Configure hypothesis for property-based testing
settings.register_profile("ci", max_examples=100, deadline=None)
settings.register_profile("dev", max_examples=20, deadline=None)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def config() -> TernExpandConfig:
    """Provide a configuration isolated from the environment and .env files."""
    with patch.dict(os.environ, {}, clear=True):
        return TernExpandConfig(_env_file=None)


@pytest.fixture
def strict_config() -> TernExpandConfig:
    """Provide an isolated configuration with strict error handling."""
    with patch.dict(os.environ, {}, clear=True):
        return TernExpandConfig(_env_file=None, strict=True)


@pytest.fixture
def array_completions() -> list[tuple[str, str]]:
    """Tern completion (name, type) pairs for Array.prototype methods."""
    return [
        ("push", "fn(newelt) -> number"),
        ("concat", "fn(other: [])"),
        ("filter", "fn(test: fn(elt, i: number) -> bool, context)"),
        ("indexOf", "fn(elt, from: number) -> number"),
        ("length", "number"),
        ("pop", "fn()"),
    ]
