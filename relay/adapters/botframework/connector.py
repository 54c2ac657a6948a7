"""Bot Connector client — posts activities back to the channel's serviceUrl."""

import time
from typing import Any, Dict, Optional
from urllib.parse import quote

import aiohttp

from relay.adapters.botframework.activity import Activity
from relay.adapters.botframework.auth import is_allowed_service_url

TOKEN_URL = "https://login.microsoftonline.com/botframework.com/oauth2/v2.0/token"
TOKEN_SCOPE = "https://api.botframework.com/.default"
# Refresh this many seconds before the token actually expires.
TOKEN_EXPIRY_MARGIN = 300


class BotFrameworkConnector:
    """Async Bot Connector REST client.

    Without an app id/password no Authorization header is sent, which is
    what the local Bot Framework Emulator expects.
    """

    def __init__(self, app_id: str = "", app_password: str = "", timeout: float = 30.0):
        self._app_id = app_id
        self._app_password = app_password
        self._timeout = timeout
        self._token: Optional[str] = None
        self._token_expires_at = 0.0

    @property
    def auth_configured(self) -> bool:
        return bool(self._app_id and self._app_password)

    @staticmethod
    def activities_url(incoming: Activity) -> str:
        base = incoming.service_url.rstrip("/")
        conversation_id = quote(incoming.conversation_id, safe="")
        url = f"{base}/v3/conversations/{conversation_id}/activities"
        if incoming.id:
            url += "/" + quote(incoming.id, safe="")
        return url

    async def _get_token(self, session: aiohttp.ClientSession) -> Optional[str]:
        if not self.auth_configured:
            return None
        if self._token and time.monotonic() < self._token_expires_at:
            return self._token
        form = {
            "grant_type": "client_credentials",
            "client_id": self._app_id,
            "client_secret": self._app_password,
            "scope": TOKEN_SCOPE,
        }
        async with session.post(TOKEN_URL, data=form) as resp:
            data = await resp.json()
            if "access_token" not in data:
                raise RuntimeError(data.get("error_description", str(data)))
        self._token = data["access_token"]
        lifetime = int(data.get("expires_in", 3600))
        self._token_expires_at = time.monotonic() + max(lifetime - TOKEN_EXPIRY_MARGIN, 0)
        return self._token

    async def send(self, incoming: Activity, outgoing: Dict[str, Any]) -> None:
        if not incoming.service_url:
            raise RuntimeError("Activity has no serviceUrl")
        if not is_allowed_service_url(incoming.service_url, allow_local=not self.auth_configured):
            raise RuntimeError(f"serviceUrl not allowed: {incoming.service_url!r}")
        timeout = aiohttp.ClientTimeout(total=self._timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            headers = {}
            token = await self._get_token(session)
            if token:
                headers["Authorization"] = f"Bearer {token}"
            async with session.post(self.activities_url(incoming), json=outgoing, headers=headers) as resp:
                if resp.status // 100 != 2:
                    body = await resp.text()
                    raise RuntimeError(f"HTTP {resp.status}: {body[:200]}")
