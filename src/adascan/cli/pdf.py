"""CLI command: adascan pdf <files> — heuristic PDF inspection."""

from __future__ import annotations

import json
import sys

import click
from rich.console import Console
from rich.table import Table

from adascan.audit.models import PdfBatchResult
from adascan.pdf.inspector import scan_pdfs
from adascan.pdf.uploads import PathUpload

console = Console(stderr=True)


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON.")
def pdf(files: tuple[str, ...], as_json: bool) -> None:
    """Check PDF files for tagging, language, and title metadata."""
    batch = scan_pdfs([PathUpload(path) for path in files])

    if as_json:
        click.echo(json.dumps(batch.to_dict(), indent=2))
    else:
        _print_batch(batch)

    if batch.total_issues > 0:
        sys.exit(1)


def _print_batch(batch: PdfBatchResult) -> None:
    table = Table(title="PDF checks", show_lines=True)
    table.add_column("File", style="cyan")
    table.add_column("Size", justify="right")
    table.add_column("Issues")
    table.add_column("Warnings")

    for result in batch.results:
        table.add_row(
            result.filename,
            str(result.size),
            "\n".join(f"[red]{i}[/red]" for i in result.issues) or "[green]none[/green]",
            "\n".join(f"[yellow]{w}[/yellow]" for w in result.warnings) or "-",
        )

    console.print(table)
    console.print(
        f"\nChecked {batch.total_files} file(s): "
        f"{batch.total_issues} issue(s), {batch.total_warnings} warning(s)"
    )
