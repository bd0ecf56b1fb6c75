"""Business services for ternexpand."""

from ternexpand.services.expand_service import Expansion, ExpandService

__all__ = [
    "ExpandService",
    "Expansion",
]
