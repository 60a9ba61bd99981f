"""Client library and CLI for the Stingray Traffic Manager REST API."""

from stingray_cli.client import Client
from stingray_cli.models import Namespace, NodeStats, Pool, PoolStats, VirtualServer

__version__ = "0.1.0"

__all__ = [
    "Client",
    "Namespace",
    "NodeStats",
    "Pool",
    "PoolStats",
    "VirtualServer",
    "__version__",
]
