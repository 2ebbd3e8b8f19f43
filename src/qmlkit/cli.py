"""
qmlkit command line interface.

Commands:

- parse: parse one QML file and print the resulting tree
- check: syntax-check several QML files
"""

from __future__ import annotations

import logging
import platform
from enum import StrEnum
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from .core.config import QmlkitConfig, load_config
from .core.document import parse_stream
from .core.emitter import emit
from .core.errors import ConfigError, ParseError, QmlError
from .core.qml_parser import QmlParser
from .core.tree import Node

app = typer.Typer(help="Translate QML-style UI files into OTML trees", no_args_is_help=True)

console = Console()


class OutputFormat(StrEnum):
    TREE = "tree"
    OTML = "otml"
    JSON = "json"


def get_version() -> str:
    """Get qmlkit version from package metadata."""
    from ._version import get_version as _get_version

    return _get_version()


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"qmlkit version {get_version()}")
        typer.echo(f"Python {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    ctx.obj = {"verbose": verbose}


def _load(ctx: typer.Context, config_path: Path | None) -> QmlkitConfig:
    """Load configuration and set up logging, exiting on a bad config file."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(code=1)

    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    level = logging.DEBUG if verbose else getattr(logging, config.logging.level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("qmlkit").setLevel(level)
    return config


def _build_tree(node: Node, tree: Tree) -> None:
    for child in node.children:
        if child.value is not None:
            label = f"[cyan]{escape(child.tag)}[/cyan]: {escape(child.value)}"
        else:
            label = f"[bold]{escape(child.tag)}[/bold]"
        _build_tree(child, tree.add(label))


@app.command("parse")
def parse_command(
    ctx: typer.Context,
    file: str = typer.Argument(..., help="QML file (resolved through the search paths)"),
    format: OutputFormat = typer.Option(OutputFormat.TREE, "--format", "-f", help="Output format"),
    raw: bool = typer.Option(False, "--raw", help="Skip tag normalization"),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="Path to qmlkit.toml"),
) -> None:
    """Parse a QML file and print the resulting tree."""
    config = _load(ctx, config_path)
    resources = config.resource_manager()

    try:
        text = resources.read_file_contents(file)
        if raw:
            doc = QmlParser.parse(text, file)
        else:
            doc = parse_stream(text, file, config.component_rules())
    except ParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(code=1)
    except QmlError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if format == OutputFormat.OTML:
        typer.echo(emit(doc))
    elif format == OutputFormat.JSON:
        typer.echo(doc.model_dump_json(indent=2))
    else:
        tree = Tree(f"[bold green]{escape(file)}[/bold green]")
        _build_tree(doc, tree)
        console.print(tree)


@app.command("check")
def check_command(
    ctx: typer.Context,
    files: list[str] = typer.Argument(..., help="QML files to check"),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="Path to qmlkit.toml"),
) -> None:
    """Check QML files for syntax errors."""
    config = _load(ctx, config_path)
    resources = config.resource_manager()
    rules = config.component_rules()

    failed = 0
    for file in files:
        try:
            doc = parse_stream(resources.read_file_contents(file), file, rules)
        except QmlError as e:
            failed += 1
            console.print(f"[red]✗[/red] {escape(file)}")
            console.print(escape(str(e)), highlight=False)
            continue
        console.print(f"[green]✓[/green] {escape(file)} ({len(doc.children)} top-level)")

    if failed:
        typer.echo(f"{failed} of {len(files)} file(s) failed", err=True)
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
