"""Tokenizer for Tern function type signatures.

Tern describes function types as ``fn(a, compare: fn(a, b) -> number) -> bool``.
The tokenizer rewrites that text into a compact form and splits it into the
structural tokens ``(``, ``)``, ``>``, ``,`` and identifiers.
"""

from __future__ import annotations

import re

STRUCTURAL_TOKENS = frozenset("()>,")
OBJECT_PLACEHOLDER = "Object"

_WHITESPACE = frozenset(" \t")

# Object literal bodies cannot contain braces: the first "}" closes the span.
_OBJECT_LITERAL = re.compile(r"\{[^}]+\}")


def normalize(text: str) -> str:
    """Rewrite signature text into the compact form consumed by the scanner.

    ``fn(`` becomes ``(``, ``->`` becomes ``>`` and every ``{...}`` object
    literal collapses to ``Object``.

    Args:
        text: Raw signature text.

    Returns:
        The rewritten text.
    """
    text = text.replace("fn(", "(")
    text = text.replace("->", ">")
    return _OBJECT_LITERAL.sub(OBJECT_PLACEHOLDER, text)


def tokenize(text: str) -> list[str]:
    """Split a signature into structural tokens and identifiers.

    Spaces and tabs are dropped. Everything between structural characters is
    one identifier, so ``i: number`` yields the single token ``i:number``.
    Malformed input never raises; it just produces an unusual token list.

    Args:
        text: Raw signature text.

    Returns:
        List of tokens in source order.
    """
    tokens: list[str] = []
    ident: list[str] = []

    for char in normalize(text):
        if char in _WHITESPACE:
            continue
        if char in STRUCTURAL_TOKENS:
            if ident:
                tokens.append("".join(ident))
                ident = []
            tokens.append(char)
        else:
            ident.append(char)

    if ident:
        tokens.append("".join(ident))

    return tokens
