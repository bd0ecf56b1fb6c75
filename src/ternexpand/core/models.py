"""Data models for ternexpand.

This module defines the tree produced by the signature parser and the
enumeration of supported snippet marker syntaxes.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class MarkerStyle(str, Enum):
    """Supported snippet tabstop syntaxes."""

    TEXTMATE = "textmate"  # ${1:name}, also used by LSP clients
    CHOCOLAT = "chocolat"  # %{1="name"}
    PLAIN = "plain"


class FnNode(BaseModel):
    """A function type parsed from a signature such as ``fn(a, b) -> number``.

    Arguments and the return type are either plain type strings or nested
    function types. The parser assigns ``ret`` at most once per node.
    """

    args: list[str | FnNode] = Field(
        default_factory=list,
        description="Argument display strings or nested function types, in order",
    )
    ret: str | FnNode | None = Field(None, description="Return type, if declared")

    def nested(self) -> list[FnNode]:
        """Return the arguments that are themselves function types."""
        return [arg for arg in self.args if isinstance(arg, FnNode)]

    def leaves(self) -> list[str]:
        """Return the plain string arguments, skipping nested function types."""
        return [arg for arg in self.args if isinstance(arg, str)]


FnNode.model_rebuild()
