"""Core module containing the parse tree models and configuration."""

from ternexpand.core.config import TernExpandConfig, get_config, reload_config
from ternexpand.core.models import FnNode, MarkerStyle

__all__ = [
    "FnNode",
    "MarkerStyle",
    "TernExpandConfig",
    "get_config",
    "reload_config",
]
