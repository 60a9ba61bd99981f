"""Virtual server commands: list, get, delete."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from stingray_cli.client.errors import error_handler
from stingray_cli.commands._common import (
    ApplianceOpt,
    ForceOpt,
    FormatOpt,
    PasswordOpt,
    UrlOpt,
    UsernameOpt,
    make_client,
)
from stingray_cli.models.virtual_server import VirtualServer
from stingray_cli.output.formatter import output

app = typer.Typer(name="vserver", help="Manage virtual server configuration.")
console = Console()


@app.command("list")
@error_handler
def list_virtual_servers(
    appliance: ApplianceOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List virtual server names."""
    with make_client(appliance, url, username, password) as client:
        names = client.list(VirtualServer)
    output(names, fmt, columns=["Name"], rows=[[n] for n in names], title="Virtual Servers")


@app.command()
@error_handler
def get(
    name: Annotated[str, typer.Argument(help="Virtual server name")],
    appliance: ApplianceOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show a virtual server's configuration."""
    with make_client(appliance, url, username, password) as client:
        vs = client.get_virtual_server(name)
    output(vs, fmt, title=f"Virtual Server: {name}")


@app.command()
@error_handler
def delete(
    name: Annotated[str, typer.Argument(help="Virtual server name")],
    force: ForceOpt = False,
    appliance: ApplianceOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
) -> None:
    """Delete a virtual server."""
    if not force:
        from rich.prompt import Confirm

        if not Confirm.ask(f"Delete virtual server '{name}'?"):
            console.print("Cancelled.")
            return
    with make_client(appliance, url, username, password) as client:
        client.delete(VirtualServer.new(name))
    console.print(f"[green]Virtual server '{name}' deleted.[/]")
