"""Command line interface for page audits, PDF checks, and the web server."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
import yaml
from rich.console import Console

from adascan import __version__
from adascan.config import AdaScanConfig
from adascan.profile.models import ScanProfile

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@click.group()
@click.version_option(version=__version__, prog_name="adascan")
@click.option(
    "--profile",
    "-p",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML scan profile (overrides ADASCAN_PROFILE).",
)
@click.option("--verbose", "-v", is_flag=True, help="Log scan progress to stderr.")
@click.pass_context
def main(ctx: click.Context, profile: Path | None, verbose: bool) -> None:
    """adascan: accessibility compliance reports for web pages and PDFs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
        datefmt="%H:%M:%S",
    )

    config = AdaScanConfig.load()
    config.verbose = verbose
    if profile is not None:
        config.profile_path = profile
    ctx.obj = {"config": config}


def resolve_profile(config: AdaScanConfig, console: Console) -> ScanProfile:
    """Load the configured scan profile, exiting with status 2 if it is broken."""
    try:
        return config.scan_profile()
    except (OSError, ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid scan profile:[/red] {e}")
        sys.exit(2)


def _register_commands() -> None:
    from adascan.cli.pdf import pdf
    from adascan.cli.scan import scan
    from adascan.cli.server import server

    for command in (scan, pdf, server):
        main.add_command(command)


_register_commands()
