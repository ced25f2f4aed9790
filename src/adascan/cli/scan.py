"""CLI command: adascan scan <url> — audit a web page."""

from __future__ import annotations

import asyncio
import json
import sys

import click
from rich.console import Console
from rich.table import Table

from adascan.audit.models import IssueType, Report
from adascan.cli import resolve_profile
from adascan.engines.pa11y import Pa11yEngine
from adascan.errors import ScanError
from adascan.service import ScanService

console = Console(stderr=True)

_TYPE_COLORS = {
    IssueType.ERROR: "red",
    IssueType.WARNING: "yellow",
    IssueType.NOTICE: "blue",
}


@click.command()
@click.argument("url")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON.")
@click.pass_context
def scan(ctx: click.Context, url: str, as_json: bool) -> None:
    """Audit a web page for accessibility issues."""
    config = ctx.obj["config"]
    profile = resolve_profile(config, console)

    if not as_json:
        console.print(
            f"[bold]adascan[/bold] auditing [cyan]{url}[/cyan] "
            f"against [cyan]{profile.standard}[/cyan]\n"
        )

    service = ScanService(Pa11yEngine(profile, executable=config.pa11y_bin))
    try:
        report = asyncio.run(service.scan_url(url))
    except ScanError as e:
        console.print(f"[red]Scan failed:[/red] {e}")
        sys.exit(2)

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
    else:
        _print_report(report)

    if report.summary.errors > 0:
        sys.exit(1)


def _print_report(report: Report) -> None:
    summary = report.summary
    console.print(f"[bold]{summary.title or summary.url}[/bold]")
    console.print(
        f"Total: {summary.total}  "
        f"[red]errors {summary.errors}[/red]  "
        f"[yellow]warnings {summary.warnings}[/yellow]  "
        f"[blue]notices {summary.notices}[/blue]\n"
    )

    categories = Table(title="Categories")
    categories.add_column("Principle")
    categories.add_column("Findings", justify="right")
    for category, count in report.categories.items():
        categories.add_row(category.value, str(count))
    console.print(categories)

    if not report.detailed_issues:
        console.print("[green]No issues found.[/green]")
        return

    issues = Table(title="Issues", show_lines=False)
    issues.add_column("Type", style="bold", width=8)
    issues.add_column("Code", style="cyan")
    issues.add_column("Count", justify="right")
    issues.add_column("Impact")
    issues.add_column("Message", max_width=60)

    for group in report.detailed_issues:
        color = _TYPE_COLORS.get(group.type, "white")
        issues.add_row(
            f"[{color}]{group.type.value}[/{color}]",
            group.code,
            str(group.count),
            group.impact,
            group.message,
        )

    console.print(issues)
    console.print(f"\nUnique issues: {report.total_unique_issues}")
