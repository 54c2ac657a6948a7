"""Unit tests for ClaudeAPIClient."""

import asyncio
from unittest.mock import patch

import aiohttp
import pytest

from relay.adapters.llm.claude_api import ClaudeAPIClient, ClaudeAPIError, create_llm
from relay.config import CLAUDE_API_URL, CLAUDE_API_VERSION, RelayConfig
from relay.ports.outbound import LLMPort


def _mock_aiohttp_session(status=200, data=None, body="", error=None, calls=None):
    """Return a class that replaces aiohttp.ClientSession.

    Every post() records (url, kwargs) into ``calls`` and either raises
    ``error`` or yields a response with the given status/json/text.
    """

    class FakeResponse:
        def __init__(self):
            self.status = status

        async def json(self):
            if isinstance(data, Exception):
                raise data
            return data

        async def text(self):
            return body

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    class FakeSession:
        def __init__(self, *args, **kwargs):
            self.kwargs = kwargs

        def post(self, url, **kwargs):
            if calls is not None:
                calls.append((url, kwargs))
            if error is not None:
                raise error
            return FakeResponse()

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    return FakeSession


@pytest.fixture
def client():
    return ClaudeAPIClient(api_key="sk-test", model="claude-test", max_tokens=500, timeout=30.0)


def test_implements_llm_port(client):
    assert isinstance(client, LLMPort)


class TestComplete:
    @pytest.mark.asyncio
    async def test_success(self, client):
        calls = []
        session = _mock_aiohttp_session(
            data={"content": [{"type": "text", "text": "Hallo!"}, {"type": "text", "text": "ignored"}]},
            calls=calls,
        )
        with patch("relay.adapters.llm.claude_api.aiohttp.ClientSession", session):
            result = await client.complete("hi")
        assert result == "Hallo!"
        assert len(calls) == 1
        url, kwargs = calls[0]
        assert url == CLAUDE_API_URL
        assert kwargs["headers"]["x-api-key"] == "sk-test"
        assert kwargs["headers"]["anthropic-version"] == CLAUDE_API_VERSION
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert kwargs["json"] == {
            "model": "claude-test",
            "max_tokens": 500,
            "messages": [{"role": "user", "content": "hi"}],
        }

    @pytest.mark.asyncio
    async def test_non_2xx(self, client):
        session = _mock_aiohttp_session(status=401, body='{"error": "invalid x-api-key"}')
        with patch("relay.adapters.llm.claude_api.aiohttp.ClientSession", session):
            with pytest.raises(ClaudeAPIError, match="HTTP 401"):
                await client.complete("hi")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("data", [
        {},
        {"content": []},
        {"content": [{"type": "tool_use"}]},
        {"content": [{"type": "text", "text": ""}]},
        ["not", "a", "dict"],
    ])
    async def test_malformed_body(self, client, data):
        session = _mock_aiohttp_session(data=data)
        with patch("relay.adapters.llm.claude_api.aiohttp.ClientSession", session):
            with pytest.raises(ClaudeAPIError):
                await client.complete("hi")

    @pytest.mark.asyncio
    async def test_invalid_json(self, client):
        session = _mock_aiohttp_session(data=ValueError("Expecting value"))
        with patch("relay.adapters.llm.claude_api.aiohttp.ClientSession", session):
            with pytest.raises(ClaudeAPIError):
                await client.complete("hi")

    @pytest.mark.asyncio
    async def test_network_error(self, client):
        session = _mock_aiohttp_session(error=aiohttp.ClientConnectionError("refused"))
        with patch("relay.adapters.llm.claude_api.aiohttp.ClientSession", session):
            with pytest.raises(ClaudeAPIError, match="refused"):
                await client.complete("hi")

    @pytest.mark.asyncio
    async def test_timeout(self, client):
        session = _mock_aiohttp_session(error=asyncio.TimeoutError())
        with patch("relay.adapters.llm.claude_api.aiohttp.ClientSession", session):
            with pytest.raises(ClaudeAPIError, match="Timeout"):
                await client.complete("hi")


class TestCreateLLM:
    def test_no_key(self):
        assert create_llm(RelayConfig()) is None

    def test_with_key(self):
        llm = create_llm(RelayConfig(claude_api_key="sk", claude_model="m"))
        assert isinstance(llm, ClaudeAPIClient)
        assert llm.model == "m"
        assert llm.max_tokens == 500
        assert llm.timeout == 30.0
