"""Configuration manager: read/write TOML config, resolve appliance profiles."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w

from stingray_cli.client.errors import ConfigurationError
from stingray_cli.config.constants import (
    CONFIG_FILE,
    DEFAULT_TIMEOUT,
    ENV_APPLIANCE_PROFILE,
    ENV_APPLIANCE_URL,
    ENV_PASSWORD,
    ENV_USERNAME,
)
from stingray_cli.config.models import ApplianceProfile, CLIConfig

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib


def _profile_entry(profile: ApplianceProfile) -> dict[str, Any]:
    """Profile fields worth persisting; defaults are left out."""
    entry = profile.model_dump(exclude={"name"}, exclude_none=True)
    if entry.get("verify_ssl") is True:
        del entry["verify_ssl"]
    if entry.get("timeout") == DEFAULT_TIMEOUT:
        del entry["timeout"]
    return entry


class ConfigManager:
    """Manages CLI configuration on disk and resolves appliance profiles."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: CLIConfig | None = None

    @property
    def config(self) -> CLIConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> CLIConfig:
        if not self.config_path.exists():
            return CLIConfig()
        data = tomllib.loads(self.config_path.read_text(encoding="utf-8"))
        profiles = {
            name: ApplianceProfile(name=name, **prof_data)
            for name, prof_data in data.get("profiles", {}).items()
        }
        return CLIConfig(
            default_profile=data.get("default_profile"),
            default_format=data.get("default_format", "table"),
            profiles=profiles,
        )

    def _to_toml(self) -> dict[str, Any]:
        cfg = self.config
        data: dict[str, Any] = {}
        if cfg.default_profile:
            data["default_profile"] = cfg.default_profile
        if cfg.default_format != "table":
            data["default_format"] = cfg.default_format
        profiles = {name: _profile_entry(p) for name, p in cfg.profiles.items()}
        if profiles:
            data["profiles"] = profiles
        return data

    def save(self) -> None:
        directory = self.config_path.parent
        directory.mkdir(parents=True, exist_ok=True)
        # Profiles hold passwords: owner-only directory and file
        os.chmod(directory, 0o700)
        payload = tomli_w.dumps(self._to_toml()).encode()
        temp = self.config_path.with_suffix(".tmp")
        fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            os.write(fd, payload)
        finally:
            os.close(fd)
        temp.replace(self.config_path)

    def add_profile(self, profile: ApplianceProfile) -> None:
        self.config.profiles[profile.name] = profile
        if not self.config.default_profile:
            self.config.default_profile = profile.name
        self.save()

    def remove_profile(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        del self.config.profiles[name]
        if self.config.default_profile == name:
            self.config.default_profile = next(iter(self.config.profiles), None)
        self.save()
        return True

    def set_default(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        self.config.default_profile = name
        self.save()
        return True

    def get_profile(self, name: str | None = None) -> ApplianceProfile | None:
        if name:
            return self.config.profiles.get(name)
        default = self.config.default_profile
        if default:
            return self.config.profiles.get(default)
        return None

    def resolve_appliance(
        self,
        profile_name: str | None = None,
        url: str | None = None,
        username: str | None = None,
        password: str | None = None,
    ) -> ApplianceProfile:
        """Resolve appliance connection settings.

        Precedence: CLI flags > env vars > config profile.
        """
        env_profile = os.environ.get(ENV_APPLIANCE_PROFILE)
        profile = self.get_profile(profile_name or env_profile)

        resolved_url = (
            url or os.environ.get(ENV_APPLIANCE_URL) or (profile.url if profile else None)
        )
        if not resolved_url:
            raise ConfigurationError(
                "No appliance URL configured. Use 'stingray config add' or set "
                f"{ENV_APPLIANCE_URL} or pass --url."
            )

        resolved_username = (
            username
            or os.environ.get(ENV_USERNAME)
            or (profile.username if profile else None)
        )
        resolved_password = (
            password
            or os.environ.get(ENV_PASSWORD)
            or (profile.password if profile else None)
        )

        return ApplianceProfile(
            name=profile.name if profile else "cli",
            url=resolved_url,
            username=resolved_username,
            password=resolved_password,
            verify_ssl=profile.verify_ssl if profile else True,
            timeout=profile.timeout if profile else DEFAULT_TIMEOUT,
        )
