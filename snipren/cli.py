"""CLI entrypoints."""

from pathlib import Path

import click
from rich.markup import escape

from snipren.console import console, err_console, setup_logging
from snipren.errors import ResolutionError
from snipren.processors.candidate_resolver import CandidateResolver


@click.command(context_settings=dict(show_default=True, auto_envvar_prefix="SNIPREN"))
@click.argument("target", type=str)
@click.option("-f", "--force", is_flag=True, default=False, help="Force rename even if target exists.")
@click.option(
    "-n",
    "--dry-run",
    is_flag=True,
    default=False,
    help="Show which file would be renamed without renaming it.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log how candidates were matched.")
def cli(target: str, force: bool, dry_run: bool, verbose: bool) -> None:
    """snipren - A fast, safe, intent-aware rename utility.

    Give the name you want, and the one existing file it evolved from
    (or into) is renamed to it.

    Examples:

        snipren route_report_before.csv     # renames route_report.csv

        snipren data.yaml                   # renames data.json

        snipren README.md                   # renames README
    """
    setup_logging(verbose)

    try:
        cwd = Path.cwd()
    except OSError as e:
        err_console.print(f"[bold red]Error:[/bold red] Failed to get current directory: {escape(str(e))}")
        raise SystemExit(1) from e

    resolver = CandidateResolver(cwd=cwd)
    try:
        intent = resolver.run(target, force=force, dry_run=dry_run)
    except ResolutionError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        raise SystemExit(1) from e

    if dry_run:
        console.print(f"[yellow]Would rename[/yellow] {escape(str(intent))}", soft_wrap=True)
        return

    console.print(escape(str(intent)), soft_wrap=True)
