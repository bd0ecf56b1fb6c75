"""Argument cleanup and tabstop snippet synthesis."""

from ternexpand.snippet.cleaner import FUNCTION_PREFIX, clean_arguments
from ternexpand.snippet.markers import MarkerSyntax, RenderedSnippet, get_syntax, render_template
from ternexpand.snippet.synthesizer import (
    DEFAULT_TRAILING_NOISE,
    build_template,
    expand_callback,
    synthesize,
    synthesize_snippet,
)

__all__ = [
    "DEFAULT_TRAILING_NOISE",
    "FUNCTION_PREFIX",
    "MarkerSyntax",
    "RenderedSnippet",
    "build_template",
    "clean_arguments",
    "expand_callback",
    "get_syntax",
    "render_template",
    "synthesize",
    "synthesize_snippet",
]
