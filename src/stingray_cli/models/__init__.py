"""Pydantic data models for the Stingray REST API."""

from stingray_cli.models.base import (
    ConfigNamespace,
    JSONConfigResource,
    JSONResource,
    JSONStatsResource,
    Namespace,
    Resourcer,
    StatsNamespace,
)
from stingray_cli.models.common import ErrorBody
from stingray_cli.models.listing import ResourceList
from stingray_cli.models.pool import Pool, PoolNode
from stingray_cli.models.stats import (
    NodeStatistics,
    NodeStats,
    PoolStatistics,
    PoolStats,
    combine_counter,
)
from stingray_cli.models.virtual_server import VirtualServer

__all__ = [
    "ConfigNamespace",
    "ErrorBody",
    "JSONConfigResource",
    "JSONResource",
    "JSONStatsResource",
    "Namespace",
    "NodeStatistics",
    "NodeStats",
    "Pool",
    "PoolNode",
    "PoolStatistics",
    "PoolStats",
    "ResourceList",
    "Resourcer",
    "StatsNamespace",
    "VirtualServer",
    "combine_counter",
]
