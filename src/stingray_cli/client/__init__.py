"""HTTP client for the Stingray REST API."""

from stingray_cli.client.errors import (
    ConfigurationError,
    DecodeError,
    ErrorResponse,
    InvalidNamespaceError,
    InvalidURLError,
    StingrayError,
    TransportError,
)
from stingray_cli.client.stingray import Client, check_response

__all__ = [
    "Client",
    "ConfigurationError",
    "DecodeError",
    "ErrorResponse",
    "InvalidNamespaceError",
    "InvalidURLError",
    "StingrayError",
    "TransportError",
    "check_response",
]
