"""Argument name cleanup for completion snippets.

Tern lists callback parameters as a label token followed by the callback's
type (``compare:``, ``fn(a, b)``) and annotates plain parameters inline
(``i:number``). These helpers reduce such display strings to the names an
editor should offer as tabstop defaults.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

# Display prefix of a synthesized callback placeholder.
FUNCTION_PREFIX = "function("


def join_pairs(items: list[str], combine: Callable[[str, str], str | None]) -> list[str]:
    """Merge adjacent elements left to right.

    ``combine(left, right)`` returns the merged element, or None to keep
    ``left`` as is and move on by one.

    Args:
        items: Elements to scan.
        combine: Pair merge function.

    Returns:
        The merged list.
    """
    results: list[str] = []
    i = 0
    n = len(items)
    while i < n:
        left = items[i]
        if i + 1 == n:
            results.append(left)
            break

        combined = combine(left, items[i + 1])
        if combined is None:
            results.append(left)
            i += 1
        else:
            results.append(combined)
            i += 2
    return results


def join_label(left: str, right: str) -> str | None:
    """Join a ``name:`` label with the argument that follows it.

    A following callback placeholder wins over the bare label; any other
    value is replaced by the label name.
    """
    if left == "" or right == "":
        return None

    if not left.endswith(":"):
        return None

    if right.startswith(FUNCTION_PREFIX):
        return right

    return left[:-1]


def strip_type_suffix(arg: str) -> str:
    """Reduce ``name:type`` to ``name``; callback placeholders are left alone."""
    if arg.find(":") > 0 and not arg.startswith(FUNCTION_PREFIX):
        return arg.split(":", 1)[0]
    return arg


def clean_arguments(args: Iterable[str]) -> list[str]:
    """Clean a list of argument display strings.

    Label arguments are joined with their values first, then inline type
    suffixes are stripped. Empty strings are dropped.

    Example:
        ["compare:", "function(a, b) {}", "context"] -> ["function(a, b) {}", "context"]
        ["elt:number", "i:number"] -> ["elt", "i"]

    Args:
        args: Raw argument display strings.

    Returns:
        Cleaned argument names.
    """
    joined = join_pairs(list(args), join_label)
    return [strip_type_suffix(arg) for arg in joined if arg]
