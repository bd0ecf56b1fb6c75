"""Render parse trees back into approximate signature text.

Used for debugging and round-trip checks only.
"""

from __future__ import annotations

from ternexpand.core.models import FnNode


def render_signature(node: FnNode | str) -> str:
    """Print a parse tree approximately as it was before it was parsed.

    Labels and inline types come back in their tokenized form, so
    ``fn(i: number)`` renders as ``fn(i:number)``.
    """
    if isinstance(node, str):
        return node

    text = f"fn({', '.join(render_signature(arg) for arg in node.args)})"
    if node.ret is not None:
        text += f" -> {render_signature(node.ret)}"
    return text
