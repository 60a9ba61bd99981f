"""Config commands: manage appliance profiles."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm

from stingray_cli.client.errors import ConfigurationError, error_handler
from stingray_cli.config.constants import DEFAULT_TIMEOUT
from stingray_cli.config.manager import ConfigManager
from stingray_cli.config.models import ApplianceProfile
from stingray_cli.output.formatter import output

app = typer.Typer(name="config", help="Manage appliance profiles and CLI configuration.")
console = Console()


def _get_manager() -> ConfigManager:
    return ConfigManager()


def _require_profile(mgr: ConfigManager, name: str) -> ApplianceProfile:
    profile = mgr.get_profile(name)
    if profile is None:
        known = ", ".join(mgr.config.profiles) or "none"
        raise ConfigurationError(f"Unknown appliance profile '{name}' (configured: {known}).")
    return profile


def _describe(profile: ApplianceProfile, default: str | None) -> dict[str, object]:
    """Profile as shown to users: password masked, auth and default state spelled out."""
    return {
        "name": profile.name,
        "url": profile.url,
        "username": profile.username or "",
        "password": "***" if profile.password else "",
        "auth": "basic" if profile.auth_configured else "incomplete",
        "verify_ssl": profile.verify_ssl,
        "timeout": profile.timeout,
        "default": profile.name == default,
    }


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    url: Annotated[str, typer.Option("--url", "-u", help="Appliance URL, e.g. https://lb1:9070")],
    username: Annotated[Optional[str], typer.Option("--username", help="Basic auth username")] = None,
    password: Annotated[Optional[str], typer.Option("--password", help="Basic auth password")] = None,
    no_verify_ssl: Annotated[bool, typer.Option("--no-verify-ssl", help="Disable SSL verification")] = False,
    timeout: Annotated[float, typer.Option("--timeout", help="Request timeout in seconds")] = DEFAULT_TIMEOUT,
    make_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Store connection details for an appliance."""
    mgr = _get_manager()
    replaced = mgr.get_profile(name) is not None
    profile = ApplianceProfile(
        name=name,
        url=url,
        username=username,
        password=password,
        verify_ssl=not no_verify_ssl,
        timeout=timeout,
    )
    mgr.add_profile(profile)
    if make_default:
        mgr.set_default(name)
    verb = "updated" if replaced else "added"
    console.print(f"[green]Profile '{name}' {verb}.[/]")
    if not profile.auth_configured:
        console.print("[yellow]No username/password stored; the appliance will reject requests.[/]")


@app.command("list")
@error_handler
def list_profiles(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """List configured appliances; the default is marked with *."""
    mgr = _get_manager()
    if not mgr.config.profiles:
        console.print("[yellow]No profiles configured. Run 'stingray config add' to get started.[/]")
        return

    default = mgr.config.default_profile
    described = [_describe(p, default) for p in mgr.config.profiles.values()]
    rows = [
        [d["name"], d["url"], d["username"], d["auth"], "*" if d["default"] else ""]
        for d in described
    ]
    output(
        {"profiles": described},
        fmt,
        columns=["Name", "URL", "Username", "Auth", "Default"],
        rows=rows,
        title="Appliance Profiles",
    )


@app.command()
@error_handler
def show(
    name: Annotated[str, typer.Argument(help="Profile name")],
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """Show one appliance profile with its password masked."""
    mgr = _get_manager()
    profile = _require_profile(mgr, name)
    output(_describe(profile, mgr.config.default_profile), fmt, title=f"Appliance: {name}")


@app.command("set-default")
@error_handler
def set_default(
    name: Annotated[str, typer.Argument(help="Profile name to set as default")],
) -> None:
    """Use NAME when no --appliance or STINGRAY_PROFILE is given."""
    mgr = _get_manager()
    profile = _require_profile(mgr, name)
    mgr.set_default(profile.name)
    console.print(f"[green]Commands now target '{name}' ({profile.url}) by default.[/]")


@app.command()
@error_handler
def test(
    name: Annotated[Optional[str], typer.Argument(help="Profile name (uses default if omitted)")] = None,
) -> None:
    """Test connectivity and credentials by listing pools."""
    from stingray_cli.client.stingray import Client
    from stingray_cli.models.pool import Pool

    mgr = _get_manager()
    profile = mgr.resolve_appliance(profile_name=name)
    console.print(f"Testing connection to [bold]{profile.url}[/]...")

    with Client.from_profile(profile) as client:
        pools = client.list(Pool)
    console.print(f"[green]Connected![/] {len(pools)} pool(s) configured.")


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name to remove")],
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
) -> None:
    """Forget an appliance profile and its stored credentials."""
    mgr = _get_manager()
    profile = _require_profile(mgr, name)
    if not force and not Confirm.ask(f"Remove '{name}' ({profile.url}) and its credentials?"):
        console.print("Cancelled.")
        return

    was_default = mgr.config.default_profile == name
    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")
    if was_default:
        fallback = mgr.config.default_profile
        console.print(f"Default profile is now {repr(fallback) if fallback else 'unset'}.")
