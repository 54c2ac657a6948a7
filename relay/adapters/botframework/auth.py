"""Inbound request authentication for the Bot Framework endpoint.

Channel requests carry an RS256 JWT signed with the Bot Framework OpenID
keys. The serviceUrl the reply goes to is restricted to Bot Framework
hosts so neither the outbound token nor the server itself can be pointed
at an arbitrary address.
"""

import asyncio
from typing import Optional
from urllib.parse import urlparse

import jwt
from jwt import PyJWKClient

OPENID_KEYS_URL = "https://login.botframework.com/v1/.well-known/keys"
TOKEN_ISSUER = "https://api.botframework.com"
# Clock skew tolerated on exp/nbf, in seconds.
TOKEN_LEEWAY = 300

ALLOWED_SERVICE_HOSTS = (
    "botframework.com",
    "botframework.us",
    "botframework.azure.us",
    "smba.trafficmanager.net",
)
# Bot Framework Emulator, accepted only when no app id is configured.
LOCAL_SERVICE_HOSTS = ("localhost", "127.0.0.1", "::1")


class AuthenticationError(Exception):
    """Inbound activity rejected."""


def _host_allowed(host: str, allowed) -> bool:
    return any(host == h or host.endswith("." + h) for h in allowed)


def is_allowed_service_url(service_url: str, allow_local: bool = False) -> bool:
    try:
        parsed = urlparse(service_url)
        host = (parsed.hostname or "").lower()
    except ValueError:
        return False
    if not host:
        return False
    if allow_local and host in LOCAL_SERVICE_HOSTS:
        return parsed.scheme in ("http", "https")
    return parsed.scheme == "https" and _host_allowed(host, ALLOWED_SERVICE_HOSTS)


class BotFrameworkAuthenticator:
    """Validates the Authorization header of inbound activities.

    With no app id configured (local emulator) only the serviceUrl check
    applies.
    """

    def __init__(self, app_id: str = "", jwks_client=None):
        self._app_id = app_id
        self._jwks_client = jwks_client

    @property
    def enabled(self) -> bool:
        return bool(self._app_id)

    def _keys(self):
        if self._jwks_client is None:
            self._jwks_client = PyJWKClient(OPENID_KEYS_URL)
        return self._jwks_client

    def _decode(self, token: str) -> dict:
        signing_key = self._keys().get_signing_key_from_jwt(token)
        return jwt.decode(
            token,
            signing_key.key,
            algorithms=["RS256"],
            audience=self._app_id,
            issuer=TOKEN_ISSUER,
            leeway=TOKEN_LEEWAY,
            options={"require": ["exp", "iss", "aud"]},
        )

    async def authenticate(self, authorization: Optional[str], service_url: str) -> None:
        if not is_allowed_service_url(service_url, allow_local=not self.enabled):
            raise AuthenticationError(f"serviceUrl not allowed: {service_url!r}")
        if not self.enabled:
            return
        if not authorization or not authorization.startswith("Bearer "):
            raise AuthenticationError("missing bearer token")

        token = authorization[7:]
        try:
            # PyJWKClient fetches keys with blocking I/O
            claims = await asyncio.to_thread(self._decode, token)
        except Exception as e:
            raise AuthenticationError(f"invalid token: {e}") from e

        claimed_url = claims.get("serviceurl")
        if claimed_url and claimed_url.rstrip("/") != service_url.rstrip("/"):
            raise AuthenticationError("serviceUrl does not match token")
