"""ternexpand CLI - Tern signature to snippet expansion.

This module provides the command-line interface for ternexpand,
enabling signature expansion, parse tree inspection, batch expansion
of completion results, and serving the HTTP API.
"""

from __future__ import annotations

import json
import logging
import traceback
from dataclasses import asdict
from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from ternexpand.core.models import MarkerStyle

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="ternexpand",
    help="Expand Tern function signatures into editor completion snippets",
    no_args_is_help=True,
)

# Rich console for formatted output
console = Console()
err_console = Console(stderr=True)

# Global verbose flag
_verbose: bool = False


def set_verbose(verbose: bool) -> None:
    """Set global verbose mode."""
    global _verbose
    _verbose = verbose


def print_exception(e: Exception) -> None:
    """Print exception details in verbose mode."""
    if _verbose:
        err_console.print("\n[dim]--- Traceback (verbose mode) ---[/dim]")
        err_console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")


def configure_logging(verbose: bool) -> None:
    """Configure root logging from the config log level (DEBUG when verbose)."""
    from ternexpand.core.config import get_config

    level = "DEBUG" if verbose else get_config().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", force=True)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output with full tracebacks"),
    ] = False,
) -> None:
    """ternexpand CLI - Tern signature expansion."""
    set_verbose(verbose)
    configure_logging(verbose)


def get_service(style: MarkerStyle | None = None):
    """Create an ExpandService honoring the optional style override."""
    from ternexpand.services.expand_service import ExpandService

    return ExpandService(style=style)


@app.command()
def expand(
    signature: Annotated[str, typer.Argument(help="Tern type string, e.g. 'fn(a, b) -> number'")],
    name: Annotated[
        str,
        typer.Option("--name", "-n", help="Completion name to prefix to the snippet"),
    ] = "",
    style: Annotated[
        Optional[MarkerStyle],
        typer.Option("--style", "-s", help="Tabstop marker syntax"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output machine-readable JSON"),
    ] = False,
) -> None:
    """Expand a signature into a completion snippet.

    Example:
        ternexpand expand "fn(elt, from: number) -> number" --name indexOf
    """
    from ternexpand.signature.parser import SignatureStructureError

    service = get_service(style)
    try:
        result = service.expand(signature, name=name)
    except SignatureStructureError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        print_exception(e)
        raise typer.Exit(1)

    if json_output:
        typer.echo(json.dumps(asdict(result), ensure_ascii=False, indent=2))
        if result.error:
            raise typer.Exit(1)
        return

    if result.error:
        err_console.print(f"[red]Error:[/red] {escape(result.error)}")
        raise typer.Exit(1)

    if result.snippet is None:
        console.print("[yellow]No snippet:[/yellow] not a function type")
        return

    typer.echo(result.completion)


@app.command()
def parse(
    signature: Annotated[str, typer.Argument(help="Tern type string to parse")],
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output the parse tree as JSON"),
    ] = False,
) -> None:
    """Show the parse tree of a signature.

    Example:
        ternexpand parse "fn(test: fn(elt, i: number) -> bool, context) -> bool"
    """
    from ternexpand.cli._tables import build_tree_table
    from ternexpand.core.models import FnNode
    from ternexpand.signature.parser import SignatureStructureError
    from ternexpand.signature.printer import render_signature

    try:
        parsed = get_service().parse(signature)
    except SignatureStructureError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        print_exception(e)
        raise typer.Exit(1)

    if json_output:
        tree = parsed.model_dump(mode="json") if isinstance(parsed, FnNode) else parsed
        typer.echo(json.dumps(tree, ensure_ascii=False, indent=2))
        return

    if parsed is None:
        console.print("[yellow]Empty signature[/yellow]")
        return

    typer.echo(render_signature(parsed))
    if isinstance(parsed, FnNode):
        console.print(build_tree_table(parsed))
        if parsed.ret is not None:
            console.print(f"Returns: {escape(render_signature(parsed.ret))}")


def _load_completions(path: Path) -> list[tuple[str, str]]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        # Tern completion responses wrap the list: {"completions": [...]}
        data = data.get("completions", [])
    return [(str(item.get("name", "")), str(item.get("type", ""))) for item in data]


@app.command()
def batch(
    file: Annotated[
        Path,
        typer.Argument(
            help="JSON file with a list of {name, type} completions",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    style: Annotated[
        Optional[MarkerStyle],
        typer.Option("--style", "-s", help="Tabstop marker syntax"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output machine-readable JSON"),
    ] = False,
) -> None:
    """Expand every completion in a JSON file.

    Accepts a list of objects with "name" and "type" keys, or a Tern
    completion response with a "completions" list.

    Example:
        ternexpand batch completions.json --style chocolat
    """
    from ternexpand.cli._tables import build_expansions_table

    try:
        items = _load_completions(file)
    except (json.JSONDecodeError, AttributeError) as e:
        err_console.print(f"[red]Error:[/red] Invalid completions file: {escape(str(e))}")
        print_exception(e)
        raise typer.Exit(1)

    results = get_service(style).expand_many(items)

    if json_output:
        typer.echo(json.dumps([asdict(r) for r in results], ensure_ascii=False, indent=2))
        return

    console.print(build_expansions_table(results))
    expanded = sum(1 for r in results if r.snippet is not None)
    console.print(f"[green]✓[/green] {expanded} of {len(results)} completions expanded")


@app.command()
def serve(
    host: Annotated[
        Optional[str],
        typer.Option("--host", help="Bind host for the HTTP API"),
    ] = None,
    port: Annotated[
        Optional[int],
        typer.Option("--port", help="Bind port for the HTTP API"),
    ] = None,
    reload: Annotated[
        bool,
        typer.Option("--reload", help="Auto-reload on code changes (dev only)"),
    ] = False,
) -> None:
    """Run the ternexpand HTTP API server (optional dependency).

    Requires the `api` extra (FastAPI + Uvicorn).
    """
    from ternexpand.core.config import get_config

    try:
        import uvicorn  # type: ignore[import-not-found]
    except ImportError as e:
        err_console.print(
            "[red]Error:[/red] HTTP API dependencies are not installed.\n"
            "[yellow]Hint:[/yellow] Install with: pip install 'ternexpand[api]'"
        )
        print_exception(e)
        raise typer.Exit(1)

    config = get_config()
    uvicorn.run(
        "ternexpand.api.app:create_app",
        host=host or config.api_host,
        port=port or config.api_port,
        reload=reload,
        factory=True,
    )


if __name__ == "__main__":
    app()
