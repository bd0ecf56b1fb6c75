"""Completion snippet synthesis from parsed function types.

Turns the FnNode for ``fn(test: fn(elt, i: number) -> bool, context)`` into
``(${1:function(elt, i) {${2}\\}})``: one primary tabstop per argument, and
callback arguments expanded one level into a ``function(...) {}`` template
whose body is a secondary tabstop.
"""

from __future__ import annotations

from ternexpand.core.models import FnNode, MarkerStyle
from ternexpand.snippet.cleaner import FUNCTION_PREFIX, clean_arguments
from ternexpand.snippet.markers import (
    PRIMARY_CLOSE,
    PRIMARY_OPEN,
    SECONDARY,
    RenderedSnippet,
    render_template,
)

DEFAULT_TRAILING_NOISE = "context"


def expand_callback(node: FnNode) -> str:
    """Build the placeholder text for a callback argument.

    Only the callback's plain arguments are kept; function types nested
    inside it are dropped rather than expanded again.
    """
    inner = clean_arguments(node.leaves())
    return f"{FUNCTION_PREFIX}{', '.join(inner)}) {{{SECONDARY}}}"


def build_template(node: FnNode, drop_trailing: str | None = DEFAULT_TRAILING_NOISE) -> str:
    """Assemble the unnumbered snippet template for a function type.

    Args:
        node: Parsed function type.
        drop_trailing: Argument name removed when it is the last argument.
            None or empty keeps every argument.

    Returns:
        Template text containing marker characters.
    """
    snips = [arg if isinstance(arg, str) else expand_callback(arg) for arg in node.args]
    snips = clean_arguments(snips)

    if drop_trailing and snips and snips[-1] == drop_trailing:
        snips.pop()

    return "(" + ", ".join(f"{PRIMARY_OPEN}{snip}{PRIMARY_CLOSE}" for snip in snips) + ")"


def synthesize_snippet(
    node: FnNode | str | None,
    style: MarkerStyle | str = MarkerStyle.TEXTMATE,
    drop_trailing: str | None = DEFAULT_TRAILING_NOISE,
) -> RenderedSnippet | None:
    """Synthesize a snippet and report its tabstop count.

    Returns:
        The rendered snippet, or None when ``node`` is not a function type.
    """
    if not isinstance(node, FnNode):
        return None
    return render_template(build_template(node, drop_trailing), style)


def synthesize(
    node: FnNode | str | None,
    style: MarkerStyle | str = MarkerStyle.TEXTMATE,
    drop_trailing: str | None = DEFAULT_TRAILING_NOISE,
) -> str | None:
    """Synthesize completion snippet text for a parsed type.

    Args:
        node: Result of ``parse``: a function type, a plain type string or None.
        style: Tabstop marker syntax.
        drop_trailing: Trailing argument name to omit.

    Returns:
        Snippet text such as ``(${1:a}, ${2:b})``, or None when the type is
        not a function. None is the normal result for leaf types.
    """
    rendered = synthesize_snippet(node, style=style, drop_trailing=drop_trailing)
    return rendered.text if rendered is not None else None
