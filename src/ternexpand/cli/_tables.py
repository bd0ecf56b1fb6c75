"""Rich table builders used by the CLI."""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table


def build_expansions_table(expansions) -> Table:
    """Build (Name, Type, Snippet) table for `batch`."""
    table = Table(show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Snippet")
    for expansion in expansions:
        if expansion.error:
            snippet = f"[red]{escape(expansion.error)}[/red]"
        elif expansion.snippet is None:
            snippet = "[dim]-[/dim]"
        else:
            snippet = escape(expansion.snippet)
        table.add_row(escape(expansion.name), escape(expansion.signature), snippet)
    return table


def build_tree_table(node) -> Table:
    """Build an (Argument, Kind) table for the arguments of a parsed function."""
    from ternexpand.signature.printer import render_signature

    table = Table(show_header=True)
    table.add_column("#")
    table.add_column("Argument")
    table.add_column("Kind")
    for index, arg in enumerate(node.args, start=1):
        kind = "leaf" if isinstance(arg, str) else "function"
        table.add_row(str(index), escape(render_signature(arg)), kind)
    return table
