"""Tokenizing, parsing and printing of Tern function type signatures."""

from ternexpand.signature.parser import (
    SignatureStructureError,
    parse,
    parse_tokens,
    parse_tree,
)
from ternexpand.signature.printer import render_signature
from ternexpand.signature.tokenizer import normalize, tokenize

__all__ = [
    "SignatureStructureError",
    "normalize",
    "parse",
    "parse_tokens",
    "parse_tree",
    "render_signature",
    "tokenize",
]
