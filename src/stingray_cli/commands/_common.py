"""Shared helpers for CLI commands: client factory and option types."""

from __future__ import annotations

from typing import Annotated

import typer

from stingray_cli.client.stingray import Client
from stingray_cli.config.manager import ConfigManager

ApplianceOpt = Annotated[
    str | None,
    typer.Option("--appliance", "-a", help="Appliance profile"),
]
UrlOpt = Annotated[
    str | None,
    typer.Option("--url", help="Appliance URL override"),
]
UsernameOpt = Annotated[
    str | None,
    typer.Option("--username", help="Username override"),
]
PasswordOpt = Annotated[
    str | None,
    typer.Option("--password", help="Password override"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format (table, json, yaml, csv)"),
]
ForceOpt = Annotated[
    bool,
    typer.Option("--force", help="Skip confirmation"),
]


def make_client(
    appliance: str | None,
    url: str | None,
    username: str | None,
    password: str | None,
) -> Client:
    """Create a Client from CLI options, env vars, or config profile."""
    mgr = ConfigManager()
    profile = mgr.resolve_appliance(
        profile_name=appliance, url=url, username=username, password=password,
    )
    return Client.from_profile(profile)
