"""Tabstop marker syntaxes for completion snippets.

The synthesizer assembles a template in which tabstops are marked with
control characters. ``render_template`` replaces those markers with a
concrete editor syntax and numbers them in a single left-to-right pass.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from ternexpand.core.models import MarkerStyle

# Template markers. Signature text never contains control characters.
PRIMARY_OPEN = "\x02"
PRIMARY_CLOSE = "\x03"
SECONDARY = "\x1a"

_MARKER_SPLIT = re.compile(f"([{PRIMARY_OPEN}{PRIMARY_CLOSE}{SECONDARY}])")
_TEXTMATE_SPECIAL = re.compile(r"([$}\\])")


def _escape_textmate(text: str) -> str:
    return _TEXTMATE_SPECIAL.sub(r"\\\1", text)


def _verbatim(text: str) -> str:
    return text


@dataclass(frozen=True)
class MarkerSyntax:
    """Concrete tabstop syntax for one editor family.

    ``primary_open`` and ``secondary`` are format strings receiving the
    tabstop ``index``.
    """

    primary_open: str
    primary_close: str
    secondary: str
    escape: Callable[[str], str] = _verbatim


@dataclass
class RenderedSnippet:
    """Snippet text together with the number of tabstops it contains."""

    text: str
    tabstops: int


SYNTAXES: dict[MarkerStyle, MarkerSyntax] = {
    MarkerStyle.TEXTMATE: MarkerSyntax(
        primary_open="${{{index}:",
        primary_close="}",
        secondary="${{{index}}}",
        escape=_escape_textmate,
    ),
    MarkerStyle.CHOCOLAT: MarkerSyntax(
        primary_open='%{{{index}="',
        primary_close='"}',
        secondary="%{{{index}}}",
    ),
    MarkerStyle.PLAIN: MarkerSyntax(
        primary_open="",
        primary_close="",
        secondary="",
    ),
}


def get_syntax(style: MarkerStyle | str) -> MarkerSyntax:
    """Look up the marker syntax for a style name.

    Raises:
        ValueError: If the style is unknown.
    """
    return SYNTAXES[MarkerStyle(style)]


def render_template(template: str, style: MarkerStyle | str) -> RenderedSnippet:
    """Replace template markers with numbered tabstops.

    Primary and secondary tabstops share one counter starting at 1, assigned
    in the order the markers appear in the template.

    Args:
        template: Text containing PRIMARY_OPEN/PRIMARY_CLOSE/SECONDARY markers.
        style: Target marker style.

    Returns:
        The rendered snippet and its tabstop count.
    """
    syntax = get_syntax(style)
    parts: list[str] = []
    counter = 0

    for piece in _MARKER_SPLIT.split(template):
        if piece == PRIMARY_OPEN:
            counter += 1
            parts.append(syntax.primary_open.format(index=counter))
        elif piece == SECONDARY:
            counter += 1
            parts.append(syntax.secondary.format(index=counter))
        elif piece == PRIMARY_CLOSE:
            parts.append(syntax.primary_close)
        elif piece:
            parts.append(syntax.escape(piece))

    return RenderedSnippet(text="".join(parts), tabstops=counter)
