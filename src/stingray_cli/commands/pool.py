"""Pool commands: list, get, apply, delete."""

from __future__ import annotations

from pathlib import Path
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
from stingray_cli.models.pool import Pool
from stingray_cli.output.formatter import output

app = typer.Typer(name="pool", help="Manage pool configuration.")
console = Console()


@app.command("list")
@error_handler
def list_pools(
    appliance: ApplianceOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List pool names."""
    with make_client(appliance, url, username, password) as client:
        names = client.list(Pool)
    output(names, fmt, columns=["Name"], rows=[[n] for n in names], title="Pools")


@app.command()
@error_handler
def get(
    name: Annotated[str, typer.Argument(help="Pool name")],
    appliance: ApplianceOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show a pool's configuration."""
    with make_client(appliance, url, username, password) as client:
        pool = client.get_pool(name)
    if fmt == "table":
        nodes = pool.properties.basic.nodes_table or []
        console.print(f"[bold]Pool:[/] {name}")
        output(
            pool, fmt,
            columns=["Node", "State", "Weight", "Priority"],
            rows=[[n.node, n.state, n.weight, n.priority] for n in nodes],
            title="Nodes",
        )
        lb = pool.properties.load_balancing
        console.print(f"Algorithm: {lb.algorithm or ''}")
        monitors = pool.properties.basic.monitors or []
        console.print(f"Monitors: {', '.join(monitors)}")
    else:
        output(pool, fmt)


@app.command()
@error_handler
def apply(
    name: Annotated[str, typer.Argument(help="Pool name")],
    file: Annotated[
        Path,
        typer.Option("--file", "-F", help="JSON document with the pool properties"),
    ],
    appliance: ApplianceOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
) -> None:
    """Create or replace a pool from a JSON file."""
    if not file.exists():
        console.print(f"[red]File not found: {file}[/]")
        raise typer.Exit(1)
    pool = Pool.new(name)
    pool.decode(file.read_bytes())
    with make_client(appliance, url, username, password) as client:
        client.set(pool)
    console.print(f"[green]Pool '{name}' saved.[/]")


@app.command()
@error_handler
def delete(
    name: Annotated[str, typer.Argument(help="Pool name")],
    force: ForceOpt = False,
    appliance: ApplianceOpt = None,
    url: UrlOpt = None,
    username: UsernameOpt = None,
    password: PasswordOpt = None,
) -> None:
    """Delete a pool."""
    if not force:
        from rich.prompt import Confirm

        if not Confirm.ask(f"Delete pool '{name}'?"):
            console.print("Cancelled.")
            return
    with make_client(appliance, url, username, password) as client:
        client.delete(Pool.new(name))
    console.print(f"[green]Pool '{name}' deleted.[/]")
