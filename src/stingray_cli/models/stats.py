"""Runtime statistics for nodes and pools.

The appliance reports 64-bit byte counters both as a single number and as
separate high/low 32-bit halves; the halves are authoritative.  Each
statistics model lists its split counters in ``split_counters`` and the
totals are rebuilt from the halves whenever those are present.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from stingray_cli.models.base import JSONStatsResource


def combine_counter(high: int, low: int) -> int:
    """Reassemble a 64-bit counter from its high and low 32-bit words."""
    return (high << 32) + low


class CounterStatistics(BaseModel):
    """Statistics payload with split 64-bit counters."""

    model_config = ConfigDict(populate_by_name=True)

    # (total, high, low) field names
    split_counters: ClassVar[tuple[tuple[str, str, str], ...]] = ()

    @model_validator(mode="after")
    def _combine_split_counters(self) -> CounterStatistics:
        present = self.model_fields_set
        for total, high, low in self.split_counters:
            if high in present or low in present:
                setattr(self, total, combine_counter(getattr(self, high), getattr(self, low)))
        return self


class NodeStatistics(CounterStatistics):
    """Per-node counters."""

    split_counters: ClassVar[tuple[tuple[str, str, str], ...]] = (
        ("bytes_in", "bytes_in_high", "bytes_in_low"),
        ("bytes_out", "bytes_out_high", "bytes_out_low"),
    )

    bytes_in: int = Field(default=0, alias="bytes_from_node")
    bytes_in_high: int = Field(default=0, ge=0, lt=2**32, alias="bytes_from_node_hi")
    bytes_in_low: int = Field(default=0, ge=0, lt=2**32, alias="bytes_from_node_lo")
    bytes_out: int = Field(default=0, alias="bytes_to_node")
    bytes_out_high: int = Field(default=0, ge=0, lt=2**32, alias="bytes_to_node_hi")
    bytes_out_low: int = Field(default=0, ge=0, lt=2**32, alias="bytes_to_node_lo")
    current_connections: int = Field(default=0, alias="current_conn")
    current_requests: int = 0
    errors: int = 0
    failures: int = 0
    new_connections: int = Field(default=0, alias="new_conn")
    pooled_connections: int = Field(default=0, alias="pooled_conn")
    port: int = 0
    max_response_time: int = Field(default=0, alias="response_max")
    min_response_time: int = Field(default=0, alias="response_min")
    mean_response_time: int = Field(default=0, alias="response_mean")
    state: str = ""
    total_connections: int = Field(default=0, alias="total_conn")


class PoolStatistics(CounterStatistics):
    """Per-pool counters."""

    split_counters: ClassVar[tuple[tuple[str, str, str], ...]] = (
        ("bytes_in", "bytes_in_high", "bytes_in_low"),
        ("bytes_out", "bytes_out_high", "bytes_out_low"),
    )

    algorithm: str = ""
    bytes_in: int = 0
    bytes_in_high: int = Field(default=0, ge=0, lt=2**32, alias="bytes_in_hi")
    bytes_in_low: int = Field(default=0, ge=0, lt=2**32)
    bytes_out: int = 0
    bytes_out_high: int = Field(default=0, ge=0, lt=2**32, alias="bytes_out_hi")
    bytes_out_low: int = Field(default=0, ge=0, lt=2**32)
    connections_queued: int = Field(default=0, alias="conns_queued")
    disabled_node_count: int = Field(default=0, alias="disabled")
    draining_node_count: int = Field(default=0, alias="draining")
    max_queue_time: int = 0
    mean_queue_time: int = 0
    min_queue_time: int = 0
    node_count: int = Field(default=0, alias="nodes")
    session_persistence: str = Field(default="", alias="persistence")
    queue_timeouts: int = 0
    sessions_migrated: int = Field(default=0, alias="session_migrated")
    state: str = ""
    total_connections: int = Field(default=0, alias="total_conn")


class NodeStats(JSONStatsResource):
    """Statistics for one node, named ``host:port``."""

    endpoint: ClassVar[str] = "nodes/node"

    statistics: NodeStatistics = Field(default_factory=NodeStatistics)


class PoolStats(JSONStatsResource):
    """Statistics for one pool."""

    endpoint: ClassVar[str] = "pools"

    statistics: PoolStatistics = Field(default_factory=PoolStatistics)
