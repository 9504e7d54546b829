"""
Command line front end for terminal link resolution.

Resolves link text the way a terminal would when the link is clicked, using
the local file system for stat and search.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from .exceptions import SettingsError
from .line_column import LineColumnExtractor
from .local import GlobFileSearch
from .local import LocalFileService
from .local import MappingCwdDetection
from .models import ExactMatch
from .models import LinkFragment
from .models import OperatingSystem
from .normalizer import PathNormalizer
from .resolver import LinkResolver
from .settings import LinkSettings
from .settings import load_settings

console = Console()

OS_CHOICE = click.Choice([item.value for item in OperatingSystem])


def _settings(roots: tuple[str, ...], os_name: str | None, remote_authority: str | None = None) -> LinkSettings:
    overrides = {
        "os": os_name,
        "remote_authority": remote_authority,
        "workspace_folders": [str(Path(root).expanduser().resolve()) for root in roots] or None,
    }
    try:
        return load_settings(overrides=overrides)
    except SettingsError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(2)


@click.group()
@click.version_option(version="0.1.0", prog_name="terminal-links")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level",
)
def cli(log_level: str) -> None:
    """Terminal Links - resolve terminal path text to files."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@cli.command()
@click.argument("text")
@click.option("--root", "roots", multiple=True, help="Workspace folder (repeatable)")
@click.option("--cwd", help="Directory the shell was in when TEXT was printed")
@click.option("--os", "os_name", type=OS_CHOICE, help="Path grammar to use")
@click.option("--remote-authority", help="Remote host the workspace lives on")
@click.option("--json", "as_json", is_flag=True, help="Print the outcome as JSON")
def resolve(
    text: str,
    roots: tuple[str, ...],
    cwd: str | None,
    os_name: str | None,
    remote_authority: str | None,
    as_json: bool,
) -> None:
    """Resolve TEXT to a single file.

    Exits with status 1 when there is no exact match.

    Examples:

        terminal-links resolve src/app.ts:42:7 --root .

        terminal-links resolve lib/foo.rb:in --cwd ~/project
    """
    settings = _settings(roots, os_name, remote_authority)
    resolver = LinkResolver(
        LocalFileService(),
        GlobFileSearch(settings.search_exclude),
        settings.base_directories(),
        os=settings.os,
        cwd_detection=MappingCwdDetection({0: str(Path(cwd).expanduser())}) if cwd else None,
        remote_authority=settings.remote_authority,
        max_results=settings.max_search_results,
    )
    outcome = asyncio.run(resolver.resolve(LinkFragment(text=text, row=0)))

    if isinstance(outcome, ExactMatch):
        if as_json:
            click.echo(
                json.dumps(
                    {
                        "match": "exact",
                        "resource": str(outcome.resource),
                        "path": outcome.resource.path,
                        "line": outcome.line_column.line,
                        "column": outcome.line_column.column,
                    }
                )
            )
        else:
            console.print(
                f"[green]✓[/green] {escape(outcome.resource.path)}"
                f"[dim]:{outcome.line_column.line}:{outcome.line_column.column}[/dim]"
            )
        return

    if as_json:
        click.echo(json.dumps({"match": "none", "search_hint": outcome.search_hint}))
    else:
        console.print(f"[yellow]No exact match.[/yellow] Search for: {escape(outcome.search_hint)}", highlight=False)
    sys.exit(1)


@cli.command()
@click.argument("text")
@click.option("--os", "os_name", type=OS_CHOICE, help="Path grammar to use")
def position(text: str, os_name: str | None) -> None:
    """Print the line:column embedded in TEXT."""
    info = LineColumnExtractor(OperatingSystem(os_name) if os_name else None).extract(text)
    click.echo(f"{info.line}:{info.column}")


@cli.command()
@click.argument("text")
@click.option("--root", "roots", multiple=True, help="Workspace folder (repeatable)")
@click.option("--os", "os_name", type=OS_CHOICE, help="Path grammar to use")
def normalize(text: str, roots: tuple[str, ...], os_name: str | None) -> None:
    """Print TEXT normalized for file search."""
    settings = _settings(roots, os_name)
    candidate = PathNormalizer(settings.os).normalize(text, settings.base_directories())
    click.echo(candidate.raw_path)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
