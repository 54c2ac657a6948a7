"""Teams incoming-webhook client using aiohttp."""

from typing import Any, Dict

import aiohttp

from relay.ports.outbound import PostResult


class TeamsWebhookClient:
    """Posts card payloads to a Teams incoming webhook. Implements WebhookPort."""

    def __init__(self, url: str = "", timeout: float = 30.0):
        self._url = url
        self._timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self._url)

    async def post(self, payload: Dict[str, Any]) -> PostResult:
        if not self.is_configured:
            return PostResult(success=False, error="TEAMS_WEBHOOK_URL not configured.")
        try:
            timeout = aiohttp.ClientTimeout(total=self._timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(self._url, json=payload) as resp:
                    if resp.status // 100 != 2:
                        body = await resp.text()
                        return PostResult(success=False, error=f"HTTP {resp.status}: {body[:200]}")
                    return PostResult(success=True)
        except Exception as e:
            return PostResult(success=False, error=str(e) or type(e).__name__)
