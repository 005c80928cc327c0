"""CLI entry point for ttl-mode.

Invoked as::

    ttl-mode [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m ttlmode.cli.main

Commands
--------
indent      Re-indent a Turtle file
highlight   Print a Turtle file with syntax highlighting
version     Show the version and effective mode settings
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from ttlmode.config import ModeConfig
    from ttlmode.highlight import StyleTag

console = Console()
err_console = Console(stderr=True)

_STYLE_COLORS: dict[str, str] = {
    "KEYWORD": "bold magenta",
    "NAMESPACE": "cyan",
    "STRING": "green",
    "DATATYPE_URI": "yellow",
    "DATATYPE_NAME": "yellow",
    "LANGUAGE": "yellow",
    "URI": "blue",
    "BLANK_NODE": "italic cyan",
    "PREFIXED_NAME": "cyan",
    "PUNCTUATION": "bold",
    "COMMENT": "dim",
}


def _read_source(path: str) -> str:
    """Read a Turtle document, exiting on error.

    Turtle is UTF-8 by definition, so undecodable bytes are reported with
    their offset instead of being replaced.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except UnicodeDecodeError as exc:
        err_console.print(f"[red]Error:[/red] {path} is not UTF-8 Turtle (byte {exc.start})")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _config_or_exit(config_path: str | None, **overrides: object) -> "ModeConfig":
    """Load configuration and apply command-line overrides, exiting on error."""
    from ttlmode.config import ConfigError, ModeConfig, load_config

    try:
        config = load_config(config_path) if config_path else ModeConfig()
        return config.with_overrides(**overrides)
    except ConfigError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)


def _warn_on_extension(config: "ModeConfig", path: str) -> None:
    if not config.is_turtle_path(path):
        err_console.print(
            f"[yellow]Warning:[/yellow] {path} does not have a Turtle extension "
            f"({', '.join(config.extensions)})"
        )


def _style_for(tag: "StyleTag") -> str:
    return _STYLE_COLORS.get(tag.name, "")


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="ttl-mode")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log indentation decisions")
def cli(verbose: bool) -> None:
    """Turtle/N3 editing mode: indentation inference and syntax highlighting."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
@click.option("--config", "config_path", default=None, help="YAML configuration file")
def version_command(config_path: str | None) -> None:
    """Show the version and the effective mode settings."""
    from ttlmode import __version__

    config = _config_or_exit(config_path)
    table = Table(show_header=False, box=None)
    table.add_row("[bold]ttl-mode[/bold]", f"v{__version__}")
    table.add_row("Indent width", str(config.indent_width))
    table.add_row("Tab width", str(config.tab_width))
    table.add_row("Extensions", " ".join(config.extensions))
    table.add_row("Config", config_path or "(defaults)")
    console.print(table)


# ---------------------------------------------------------------------------
# indent command
# ---------------------------------------------------------------------------


@cli.command(name="indent")
@click.argument("file", type=click.Path(exists=False))
@click.option("--indent-width", "-w", type=int, default=None, help="Columns per indentation level")
@click.option("--config", "config_path", default=None, help="YAML configuration file")
@click.option("--check", is_flag=True, default=False, help="Check if file is already indented")
@click.option("--in-place", is_flag=True, default=False, help="Rewrite the file in place")
def indent_command(
    file: str, indent_width: int | None, config_path: str | None, check: bool, in_place: bool
) -> None:
    """Re-indent every line of a Turtle file, top to bottom.

    FILE is the path to the .ttl or .n3 file to indent.

    Without --check or --in-place, prints the re-indented output to stdout.
    """
    from ttlmode.buffer import TextBuffer
    from ttlmode.indent import Indenter

    config = _config_or_exit(config_path, indent_width=indent_width)
    _warn_on_extension(config, file)
    source = _read_source(file)

    buffer = TextBuffer(source, tab_width=config.tab_width)
    Indenter(config.indent_width).indent_region(buffer)
    indented = buffer.text

    if check:
        if indented == source:
            console.print(f"[green]OK[/green] {file}: already indented")
            sys.exit(0)
        else:
            console.print(f"[yellow]NEEDS INDENTING[/yellow] {file}")
            sys.exit(1)
    elif in_place:
        Path(file).write_text(indented, encoding="utf-8")
        console.print(f"[green]Indented[/green] {file}")
    else:
        syntax = Syntax(indented, "turtle", line_numbers=True)
        console.print(syntax)


# ---------------------------------------------------------------------------
# highlight command
# ---------------------------------------------------------------------------


@cli.command(name="highlight")
@click.argument("file", type=click.Path(exists=False))
@click.option("--start", type=int, default=0, help="Start offset of the region to scan")
@click.option("--end", type=int, default=None, help="End offset of the region to scan")
@click.option("--spans", is_flag=True, default=False, help="List styled spans instead of rendering")
def highlight_command(file: str, start: int, end: int | None, spans: bool) -> None:
    """Print a Turtle file with syntax highlighting.

    FILE is the path to the .ttl or .n3 file to highlight.
    """
    from ttlmode.highlight import classify, extend_region

    source = _read_source(file)
    styled = classify(source, start, end)

    if spans:
        lo, hi = extend_region(source, start, len(source) if end is None else end)
        table = Table(title=f"Spans: {file} [{lo}:{hi}]", show_lines=False)
        table.add_column("Start", justify="right")
        table.add_column("End", justify="right")
        table.add_column("Style", min_width=14)
        table.add_column("Text")
        for span in styled:
            table.add_row(
                str(span.start),
                str(span.end),
                Text(span.style.name, style=_style_for(span.style)),
                Text(source[span.start : span.end]),
            )
        console.print(table)
        return

    text = Text(source)
    for span in styled:
        style = _style_for(span.style)
        if style:
            text.stylize(style, span.start, span.end)
    console.print(text, end="")


if __name__ == "__main__":
    cli()
