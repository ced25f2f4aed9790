"""CLI command: adascan server — start the web UI."""

from __future__ import annotations

import click
from rich.console import Console

from adascan.cli import resolve_profile
from adascan.engines.pa11y import Pa11yEngine

console = Console(stderr=True)


@click.command()
@click.option(
    "--port",
    type=int,
    default=None,
    help="Port to listen on (default: 3000).",
)
@click.option(
    "--host",
    default=None,
    help="Interface to bind (default: 127.0.0.1).",
)
@click.pass_context
def server(ctx: click.Context, port: int | None, host: str | None) -> None:
    """Start the adascan web server."""
    import uvicorn

    from adascan.web.app import create_app

    config = ctx.obj["config"]
    if port is not None:
        config.web_port = port
    if host is not None:
        config.web_host = host
    profile = resolve_profile(config, console)

    console.print(
        f"[bold]adascan[/bold] server running at "
        f"[cyan]http://{config.web_host}:{config.web_port}[/cyan]\n"
    )

    app = create_app(config, engine=Pa11yEngine(profile, executable=config.pa11y_bin))
    uvicorn.run(app, host=config.web_host, port=config.web_port, log_level="info")
