"""Virtual server configuration resource."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from stingray_cli.models.base import JSONConfigResource


class VirtualServerBasic(BaseModel):
    model_config = ConfigDict(extra="allow")

    enabled: bool | None = None
    pool: str | None = None
    port: int | None = None
    protocol: str | None = None
    listen_on_any: bool | None = None
    note: str | None = None


class VirtualServerProperties(BaseModel):
    model_config = ConfigDict(extra="allow")

    basic: VirtualServerBasic = Field(default_factory=VirtualServerBasic)


class VirtualServer(JSONConfigResource):
    """A virtual server accepting traffic and handing it to a pool."""

    endpoint: ClassVar[str] = "virtual_servers"

    properties: VirtualServerProperties = Field(default_factory=VirtualServerProperties)
