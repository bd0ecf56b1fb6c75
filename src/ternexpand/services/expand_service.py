"""Expansion service for Tern signatures.

This module provides the ExpandService as a high-level interface that parses
Tern type strings and turns them into completion snippets, applying the
configured marker style and error policy.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ternexpand.core.config import TernExpandConfig, get_config
from ternexpand.core.models import FnNode, MarkerStyle
from ternexpand.signature.parser import SignatureStructureError, parse
from ternexpand.snippet.synthesizer import synthesize_snippet

logger = logging.getLogger(__name__)


@dataclass
class Expansion:
    """Result of expanding one signature."""

    signature: str
    name: str = ""
    snippet: str | None = None
    completion: str = ""
    tabstops: int = 0
    error: str | None = None

    @property
    def success(self) -> bool:
        """Check if a snippet was produced."""
        return self.snippet is not None


class ExpandService:
    """High-level service for turning Tern signatures into snippets.

    Each call parses and synthesizes independently, so one instance can be
    shared between threads.
    """

    def __init__(
        self,
        config: TernExpandConfig | None = None,
        *,
        style: MarkerStyle | str | None = None,
        strict: bool | None = None,
    ) -> None:
        """Initialize expand service.

        Args:
            config: Optional configuration (defaults to the cached global config).
            style: Override for the configured marker style.
            strict: Override for the configured error policy.
        """
        self._config = config or get_config()
        self._style = MarkerStyle(style) if style is not None else self._config.snippet_style
        self._strict = self._config.strict if strict is None else strict

    @property
    def style(self) -> MarkerStyle:
        """Marker style used for generated snippets."""
        return self._style

    def parse(self, signature: str) -> FnNode | str | None:
        """Parse a signature into its top-level type.

        Raises:
            SignatureStructureError: If the signature is structurally malformed.
        """
        return parse(signature)

    def expand(self, signature: str, name: str = "") -> Expansion:
        """Expand a signature into a completion snippet.

        Args:
            signature: Tern type string, e.g. ``fn(elt, from: number) -> number``.
            name: Completion name prefixed to the snippet in ``completion``.

        Returns:
            Expansion whose ``snippet`` is None for non-function types and,
            outside strict mode, for malformed signatures.

        Raises:
            SignatureStructureError: In strict mode, if the signature is
                structurally malformed.
        """
        try:
            parsed = parse(signature)
        except SignatureStructureError as e:
            if self._strict:
                raise
            logger.warning(f"Malformed signature {signature!r}: {e}")
            return Expansion(signature=signature, name=name, completion=name, error=str(e))

        rendered = synthesize_snippet(
            parsed,
            style=self._style,
            drop_trailing=self._config.trailing_noise_param or None,
        )
        if rendered is None:
            logger.debug(f"Not a function type, no snippet: {signature!r}")
            return Expansion(signature=signature, name=name, completion=name)

        return Expansion(
            signature=signature,
            name=name,
            snippet=rendered.text,
            completion=name + rendered.text,
            tabstops=rendered.tabstops,
        )

    def expand_many(self, items: Iterable[tuple[str, str]]) -> list[Expansion]:
        """Expand a batch of ``(name, signature)`` pairs, e.g. completion results.

        Args:
            items: Completion names with their Tern types.

        Returns:
            One Expansion per item, in input order.
        """
        return [self.expand(signature, name=name) for name, signature in items]
