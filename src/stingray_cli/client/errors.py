"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any, Callable, TypeVar

import httpx
from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from stingray_cli.models.base import Resourcer

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class StingrayError(Exception):
    """Base exception for stingray-cli."""

    exit_code: int = 1


class TransportError(StingrayError):
    """No response was obtained (connection refused, DNS, TLS, timeout)."""

    exit_code = 2


class ErrorResponse(StingrayError):
    """The appliance answered with a status outside 200-299.

    ``error_id``, ``error_text`` and ``error_info`` are parsed from the
    response body when it is a JSON error document and keep their empty
    defaults otherwise; the status, method and URL are always available
    from ``response``.
    """

    exit_code = 3

    def __init__(
        self,
        response: httpx.Response,
        error_id: str = "",
        error_text: str = "",
        error_info: Any = None,
    ) -> None:
        self.response = response
        self.error_id = error_id
        self.error_text = error_text
        self.error_info = error_info
        super().__init__(self._describe())

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def _describe(self) -> str:
        try:
            request = self.response.request
            target = f"{request.method} {request.url}"
        except RuntimeError:
            # Responses built by hand carry no request.
            target = "<no request>"
        return (
            f"{target}: {self.response.status_code} "
            f"{self.error_id} {self.error_text} {self.error_info}"
        )


class DecodeError(StingrayError):
    """A success response body did not match the expected resource shape."""

    exit_code = 4

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        resource: Resourcer | None = None,
    ) -> None:
        self.response = response
        self.resource = resource
        super().__init__(message)


class InvalidNamespaceError(StingrayError):
    """A request was routed to a namespace the client has no base URL for."""

    exit_code = 5


class InvalidURLError(StingrayError):
    """A root URL or resource path could not be parsed."""

    exit_code = 5


class ConfigurationError(StingrayError):
    """No usable appliance connection settings were found."""

    exit_code = 6


def error_handler(func: F) -> F:
    """Decorator that catches StingrayError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except StingrayError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
