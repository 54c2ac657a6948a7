"""Claude Messages API adapter — implements LLMPort."""

import asyncio
from typing import Optional

import aiohttp

from relay.config import CLAUDE_API_URL, CLAUDE_API_VERSION, RelayConfig


class ClaudeAPIError(Exception):
    """Any failure talking to the Claude API."""


class ClaudeAPIClient:
    """Single-shot calls to the Messages endpoint. Implements LLMPort protocol."""

    def __init__(
        self,
        api_key: str,
        model: str,
        max_tokens: int = 500,
        timeout: float = 30.0,
        url: str = CLAUDE_API_URL,
    ):
        self._api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._url = url

    def _headers(self) -> dict:
        return {
            "Content-Type": "application/json",
            "x-api-key": self._api_key,
            "anthropic-version": CLAUDE_API_VERSION,
        }

    def _payload(self, message: str) -> dict:
        return {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": message}],
        }

    @staticmethod
    def _first_text(data) -> str:
        try:
            text = data["content"][0]["text"]
        except (KeyError, IndexError, TypeError):
            raise ClaudeAPIError(f"Unexpected response shape: {str(data)[:200]}")
        if not isinstance(text, str) or not text:
            raise ClaudeAPIError("Response contained no text")
        return text

    async def complete(self, message: str) -> str:
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(
                    self._url, json=self._payload(message), headers=self._headers()
                ) as resp:
                    if resp.status // 100 != 2:
                        body = await resp.text()
                        raise ClaudeAPIError(f"HTTP {resp.status}: {body[:200]}")
                    data = await resp.json()
        except asyncio.TimeoutError:
            raise ClaudeAPIError(f"Timeout ({self.timeout:.0f}s)")
        except (aiohttp.ClientError, ValueError) as e:
            raise ClaudeAPIError(str(e)) from e
        return self._first_text(data)


def create_llm(config: RelayConfig) -> Optional[ClaudeAPIClient]:
    """Claude client when a key is configured, else None (fallback only)."""
    if not config.claude_configured:
        return None
    return ClaudeAPIClient(
        api_key=config.claude_api_key,
        model=config.claude_model,
        max_tokens=config.claude_max_tokens,
        timeout=config.claude_timeout_seconds,
    )
