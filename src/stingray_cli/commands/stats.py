"""Statistics commands: node and pool counters."""

from __future__ import annotations

from typing import Annotated

import typer

from stingray_cli.client.errors import error_handler
from stingray_cli.commands._common import (
    ApplianceOpt,
    FormatOpt,
    PasswordOpt,
    UrlOpt,
    UsernameOpt,
    make_client,
)
from stingray_cli.output.formatter import output

app = typer.Typer(name="stats", help="Read node and pool statistics.")


@app.command()
@error_handler
def node(
    name: Annotated[str, typer.Argument(help="Node as host:port")],
    appliance: ApplianceOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show statistics for a node."""
    with make_client(appliance, url, username, password) as client:
        stats = client.get_node_stats(name)
    output(stats.statistics, fmt, title=f"Node Statistics: {name}")


@app.command()
@error_handler
def pool(
    name: Annotated[str, typer.Argument(help="Pool name")],
    appliance: ApplianceOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show statistics for a pool."""
    with make_client(appliance, url, username, password) as client:
        stats = client.get_pool_stats(name)
    output(stats.statistics, fmt, title=f"Pool Statistics: {name}")
