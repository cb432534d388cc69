"""
sitter-parse CLI

Parse a source file with tree-sitter and print its syntax tree.

Usage:
    sitter-parse parse path/to/file.py
    sitter-parse parse path/to/file.json --json
    sitter-parse parse path/to/file.rs --summary
    sitter-parse languages
    sitter-parse doctor
"""

import typer
from pydantic import ValidationError
from pydantic_settings import SettingsError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sitter_parse.config import get_settings
from sitter_parse.dispatch import Dispatcher
from sitter_parse.exceptions import EXIT_GRAMMAR_LOAD, EXIT_USAGE, SitterParseError, UsageError
from sitter_parse.observability import bind_context, get_logger, setup_logging
from sitter_parse.parsing import ExtensionRegistry, get_loader
from sitter_parse.rendering import TreeInfo, render_json, render_sexp, render_summary

app = typer.Typer(
    name="sitter-parse",
    help="Parse source files with tree-sitter and print the syntax tree",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

logger = get_logger(__name__)


def _exit_with(error: SitterParseError) -> typer.Exit:
    err_console.print(f"[bold red]Error:[/bold red] {escape(error.message)}", soft_wrap=True)
    if error.hint:
        err_console.print(f"[dim]{escape(error.hint)}[/dim]", soft_wrap=True)
    logger.debug("command_failed", error_type=type(error).__name__, exit_code=error.exit_code)
    return typer.Exit(code=error.exit_code)


@app.callback()
def main(
    log_level: str | None = typer.Option(None, "--log-level", help="Log level (default: SITTER_PARSE_LOG_LEVEL)"),
    log_format: str | None = typer.Option(None, "--log-format", help="Log format: console or json"),
):
    """
    Parse source files with tree-sitter and print the syntax tree.
    """
    try:
        settings = get_settings()
    except (ValidationError, SettingsError) as e:
        err_console.print(f"[bold red]Invalid configuration:[/bold red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(code=EXIT_USAGE) from e

    setup_logging(
        level=log_level or settings.logging.level,
        format=log_format or settings.logging.format,
    )


@app.command()
def parse(
    file: str = typer.Argument(..., help="Source file to parse"),
    json_mode: bool = typer.Option(False, "--json", help="Output a breadth-first JSON node dump"),
    summary: bool = typer.Option(False, "--summary", help="Output headline tree info"),
    cap: int | None = typer.Option(None, "--cap", min=1, help="Max nodes in the JSON dump (default: 2000)"),
):
    """
    Parse a file and print its tree.

    Syntax errors in the file are part of the tree and do not fail the command.
    """
    settings = get_settings()
    bind_context(file=file)

    try:
        if json_mode and summary:
            raise UsageError("--json and --summary are mutually exclusive")

        tree = Dispatcher.from_settings(settings).parse_file(file)
    except SitterParseError as e:
        raise _exit_with(e) from e

    if json_mode:
        node_cap = cap or settings.render.node_cap
        typer.echo(render_json(file, tree.root, cap=node_cap, indent=settings.render.json_indent))
    elif summary:
        typer.echo(render_summary(TreeInfo.from_tree(tree)))
    else:
        typer.echo(render_sexp(tree.root))


@app.command()
def languages():
    """
    List configured file extensions and their grammars.
    """
    registry = ExtensionRegistry(get_settings().grammars.extra_extensions)

    table = Table(title="Configured grammars")
    table.add_column("Extension", style="cyan")
    table.add_column("Grammar", style="green")
    for extension, identifier in registry.entries():
        table.add_row(f".{extension}", identifier)

    console.print(table)


@app.command()
def doctor():
    """
    Try to load every configured grammar and report which are available.
    """
    registry = ExtensionRegistry(get_settings().grammars.extra_extensions)
    statuses = get_loader().check(registry.identifiers)

    table = Table(title="Grammar availability")
    table.add_column("Grammar", style="cyan")
    table.add_column("Status")
    table.add_column("Error", style="dim")
    for status in statuses:
        mark = "[green]ok[/green]" if status.ok else "[red]failed[/red]"
        table.add_row(status.identifier, mark, escape(status.error or ""))

    console.print(table)

    failed = [s.identifier for s in statuses if not s.ok]
    if failed:
        err_console.print(
            f"[bold red]{len(failed)} grammar(s) failed to load:[/bold red] {', '.join(failed)}",
            soft_wrap=True,
        )
        raise typer.Exit(code=EXIT_GRAMMAR_LOAD)

    console.print(f"\n[bold green]All {len(statuses)} grammars loaded[/bold green]")


if __name__ == "__main__":
    app()
