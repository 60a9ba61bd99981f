"""Stingray REST API client.

The appliance exposes two sibling trees: configuration objects under
``/api/tm/3.5/config/active/`` and runtime counters under
``/api/tm/3.5/status/local_tm/statistics/``.  :class:`Client` resolves both
roots once and routes each resource to the right one by its ``namespace``.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from stingray_cli.client.auth import BasicAuth, resolve_auth
from stingray_cli.client.errors import (
    DecodeError,
    ErrorResponse,
    InvalidNamespaceError,
    InvalidURLError,
    TransportError,
)
from stingray_cli.config.constants import (
    BASE_CONFIG_PATH,
    BASE_STATS_PATH,
    STATS_FROM_CONFIG_PATH,
)
from stingray_cli.config.models import ApplianceProfile
from stingray_cli.models.base import Namespace, Resourcer
from stingray_cli.models.common import ErrorBody
from stingray_cli.models.listing import ResourceList
from stingray_cli.models.pool import Pool
from stingray_cli.models.stats import NodeStats, PoolStats
from stingray_cli.models.virtual_server import VirtualServer
from stingray_cli.serialization import json_unmarshal

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Resourcer)


def resolve_base_urls(root: str) -> tuple[httpx.URL, httpx.URL]:
    """Return the ``(config, stats)`` base URLs for an appliance root URL.

    A bare ``scheme://host[:port]`` gets the versioned API paths appended.
    A URL that already has a path is taken to be the configuration root and
    the statistics root is found relative to it.
    """
    try:
        url = httpx.URL(root)
    except httpx.InvalidURL as exc:
        raise InvalidURLError(f"Invalid appliance URL {root!r}: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidURLError(
            f"Invalid appliance URL {root!r}: expected http(s)://host[:port][/path]"
        )

    if url.path in ("", "/"):
        return url.join(BASE_CONFIG_PATH), url.join(BASE_STATS_PATH)

    if not url.path.endswith("/"):
        url = url.copy_with(path=url.path + "/")
    return url, url.join(STATS_FROM_CONFIG_PATH)


def check_response(response: httpx.Response) -> None:
    """Raise :class:`ErrorResponse` unless *response* has a 2xx status.

    API errors are expected to carry either no body or a JSON document with
    ``error_id``, ``error_text`` and ``error_info``.  Any other body leaves
    those fields empty; the error is raised regardless.
    """
    if 200 <= response.status_code <= 299:
        return

    try:
        data = response.read()
    except (httpx.HTTPError, httpx.StreamError):
        data = b""

    body = ErrorBody()
    if data:
        try:
            parsed = json_unmarshal(data)
        except ValueError:
            # Not JSON; status, method and URL still apply.
            parsed = None
        if isinstance(parsed, dict):
            body = ErrorBody.model_validate(parsed)

    raise ErrorResponse(
        response,
        error_id=body.error_id or "",
        error_text=body.error_text or "",
        error_info=body.error_info,
    )


def _resource_path(resource: Resourcer) -> str:
    return f"{resource.endpoint}/{resource.name}"


class Client:
    """Synchronous client for the Stingray REST API.

    :param url: Appliance URL, either ``https://host:9070`` or the
        configuration root ``https://host:9070/api/tm/3.5/config/active/``.
    :param username: Basic auth username sent with every request.
    :param password: Basic auth password sent with every request.
    :param http_client: Transport to send requests with.  When omitted a
        default :class:`httpx.Client` is created and closed by :meth:`close`.
    :param auth: Pre-built credentials; overrides *username* and *password*.

    The client keeps no per-call state, so one instance may be shared
    between threads as far as the underlying ``httpx.Client`` allows.
    Nothing here retries; every verb is one round trip.
    """

    def __init__(
        self,
        url: str,
        username: str | None = None,
        password: str | None = None,
        *,
        http_client: httpx.Client | None = None,
        auth: BasicAuth | None = None,
    ) -> None:
        self._config_url, self._stats_url = resolve_base_urls(url)
        self._auth = auth if auth is not None else BasicAuth(username, password)
        self._username = username
        self._owns_http = http_client is None
        self.http = http_client if http_client is not None else httpx.Client()

    @classmethod
    def from_profile(cls, profile: ApplianceProfile) -> Client:
        """Create a client from a resolved appliance profile."""
        # Fail on a bad URL before a transport exists to leak.
        resolve_base_urls(profile.url)
        if not profile.verify_ssl:
            logger.warning("TLS certificate verification is disabled for %s", profile.url)
        http = httpx.Client(
            verify=profile.verify_ssl,
            timeout=profile.timeout,
            headers={"Accept": "application/json"},
        )
        client = cls(
            profile.url,
            profile.username,
            profile.password,
            http_client=http,
            auth=resolve_auth(profile),
        )
        client._owns_http = True
        return client

    @property
    def config_url(self) -> httpx.URL:
        return self._config_url

    @property
    def stats_url(self) -> httpx.URL:
        return self._stats_url

    @property
    def username(self) -> str | None:
        return self._username

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def build_request(
        self,
        namespace: Namespace,
        method: str,
        path: str,
        body: bytes | None = None,
    ) -> httpx.Request:
        """Build an authenticated request for *path* in *namespace*.

        *path* is resolved against the namespace's base URL, so
        ``"pools/web"`` extends it while ``"/other"`` or a full URL replaces
        it.  Content type is left to the caller.
        """
        if namespace is Namespace.CONFIGURATION:
            base = self._config_url
        elif namespace is Namespace.STATISTICS:
            base = self._stats_url
        else:
            raise InvalidNamespaceError(
                f"Cannot route request to unknown namespace {namespace!r}"
            )

        try:
            url = base.join(path)
        except httpx.InvalidURL as exc:
            raise InvalidURLError(f"Invalid resource path {path!r}: {exc}") from exc

        request = self.http.build_request(method, url, content=body)
        return self._auth.apply(request)

    def new_request(
        self, method: str, path: str, body: bytes | None = None,
    ) -> httpx.Request:
        """Build a request against the configuration namespace."""
        return self.build_request(Namespace.CONFIGURATION, method, path, body)

    def do(self, request: httpx.Request) -> httpx.Response:
        """Send *request* and check the response status.

        Raises :class:`TransportError` when no response was obtained and
        :class:`ErrorResponse` (holding the response) on a non-2xx status.
        """
        logger.debug("%s %s", request.method, request.url)
        try:
            response = self.http.send(request)
        except httpx.TransportError as exc:
            raise TransportError(
                f"{request.method} {request.url} failed: {exc}"
            ) from exc
        if not 200 <= response.status_code <= 299:
            logger.warning(
                "%s %s returned %d", request.method, request.url, response.status_code,
            )
        check_response(response)
        return response

    def get(self, resource: Resourcer) -> httpx.Response:
        """Fetch *resource* and populate it in place from the response body."""
        request = self.build_request(resource.namespace, "GET", _resource_path(resource))
        response = self.do(request)
        try:
            resource.decode(response.content)
        except ValueError as exc:
            raise DecodeError(
                f"Cannot decode {type(resource).__name__} {resource.name!r}: {exc}",
                response=response,
                resource=resource,
            ) from exc
        return response

    def set(self, resource: Resourcer) -> httpx.Response:
        """Create or replace *resource* on the appliance.

        The PUT response body is not decoded back into *resource*.
        """
        request = self.build_request(
            resource.namespace, "PUT", _resource_path(resource), resource.encode(),
        )
        request.headers["Content-Type"] = resource.content_type
        return self.do(request)

    def delete(self, resource: Resourcer) -> httpx.Response:
        """Delete *resource* from the appliance."""
        request = self.build_request(resource.namespace, "DELETE", _resource_path(resource))
        return self.do(request)

    def get_node_stats(self, name: str) -> NodeStats:
        return self._fetch(NodeStats.new(name))

    def get_pool_stats(self, name: str) -> PoolStats:
        return self._fetch(PoolStats.new(name))

    def get_pool(self, name: str) -> Pool:
        return self._fetch(Pool.new(name))

    def get_virtual_server(self, name: str) -> VirtualServer:
        return self._fetch(VirtualServer.new(name))

    def _fetch(self, resource: R) -> R:
        self.get(resource)
        return resource

    def list(self, resource: Resourcer | type[Resourcer]) -> list[str]:
        """Return the names of all resources of *resource*'s kind.

        Accepts an instance or the resource class itself.  Names come back
        in the order the appliance lists them.
        """
        request = self.build_request(resource.namespace, "GET", resource.endpoint)
        response = self.do(request)
        try:
            listing = ResourceList.model_validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(
                f"Cannot decode {resource.endpoint} listing: {exc}", response=response,
            ) from exc
        return listing.names()
