"""Pool configuration resource."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from stingray_cli.models.base import JSONConfigResource


class _Section(BaseModel):
    # Keys this model does not know about survive a get/set round trip.
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class PoolNode(_Section):
    """An entry of a pool's nodes table."""

    node: str
    state: str | None = None
    weight: int | None = None
    priority: int | None = None


class PoolBasic(_Section):
    nodes_table: list[PoolNode] | None = None
    monitors: list[str] | None = None
    note: str | None = None
    passive_monitoring: bool | None = None
    persistence_class: str | None = None
    transparent: bool | None = None
    max_idle_connections_pernode: int | None = None


class PoolLoadBalancing(_Section):
    algorithm: str | None = None
    priority_enabled: bool | None = None
    priority_nodes: int | None = None


class PoolConnection(_Section):
    max_connect_time: int | None = None
    max_reply_time: int | None = None
    queue_timeout: int | None = None


class PoolProperties(_Section):
    basic: PoolBasic = Field(default_factory=PoolBasic)
    load_balancing: PoolLoadBalancing = Field(default_factory=PoolLoadBalancing)
    connection: PoolConnection = Field(default_factory=PoolConnection)


class Pool(JSONConfigResource):
    """A pool of back-end nodes."""

    endpoint: ClassVar[str] = "pools"

    properties: PoolProperties = Field(default_factory=PoolProperties)

    def node_names(self) -> list[str]:
        return [n.node for n in self.properties.basic.nodes_table or []]
