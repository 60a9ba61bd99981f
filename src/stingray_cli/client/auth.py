"""Authentication for the Stingray REST API."""

from __future__ import annotations

import logging

import httpx

from stingray_cli.config.models import ApplianceProfile

logger = logging.getLogger(__name__)


class BasicAuth(httpx.BasicAuth):
    """HTTP Basic auth, stamped onto every request the client builds."""

    def __init__(self, username: str | None, password: str | None) -> None:
        super().__init__(username or "", password or "")

    def apply(self, request: httpx.Request) -> httpx.Request:
        """Set the ``Authorization`` header on *request* and return it."""
        return next(self.auth_flow(request))


def resolve_auth(profile: ApplianceProfile) -> BasicAuth:
    """Resolve authentication from an appliance profile.

    The REST API only accepts Basic auth, so a header is always sent; with
    missing credentials the appliance answers 401.
    """
    if not profile.auth_configured:
        logger.warning(
            "Profile '%s' has no username/password; requests will likely fail with 401",
            profile.name,
        )
    return BasicAuth(profile.username, profile.password)
