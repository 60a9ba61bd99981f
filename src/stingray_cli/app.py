"""Root Typer app: global options and command group registration."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from stingray_cli import __version__
from stingray_cli.commands import config_cmd, pool, stats, virtual_server

app = typer.Typer(
    name="stingray",
    help="CLI for the Stingray Traffic Manager REST API.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"stingray-cli {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send library logs to stderr through Rich."""
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
    # httpx/httpcore are chatty at DEBUG
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests to stderr."),
) -> None:
    """Stingray Traffic Manager CLI: manage pools, virtual servers, and statistics."""
    configure_logging(verbose)


app.add_typer(config_cmd.app, name="config")
app.add_typer(pool.app, name="pool")
app.add_typer(virtual_server.app, name="vserver")
app.add_typer(stats.app, name="stats")


def main() -> None:
    app()
