"""Unit tests for TeamsWebhookClient."""

from unittest.mock import MagicMock, patch

import aiohttp
import pytest

from relay.adapters.webhook.teams_webhook import TeamsWebhookClient
from relay.ports.outbound import WebhookPort

HOOK_URL = "https://example.webhook.office.com/webhookb2/abc"


def _mock_aiohttp_session(status=200, body="1", error=None, calls=None):
    class FakeResponse:
        def __init__(self):
            self.status = status

        async def text(self):
            return body

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    class FakeSession:
        def __init__(self, *args, **kwargs):
            pass

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


class TestIsConfigured:
    def test_configured(self):
        assert TeamsWebhookClient(HOOK_URL).is_configured is True

    def test_unconfigured(self):
        assert TeamsWebhookClient("").is_configured is False

    def test_implements_port(self):
        assert isinstance(TeamsWebhookClient(HOOK_URL), WebhookPort)


class TestPost:
    @pytest.mark.asyncio
    async def test_post_success(self):
        calls = []
        card = {"@type": "MessageCard", "sections": [{"text": "hi"}]}
        with patch("relay.adapters.webhook.teams_webhook.aiohttp.ClientSession",
                   _mock_aiohttp_session(calls=calls)):
            result = await TeamsWebhookClient(HOOK_URL).post(card)
        assert result.success is True
        assert result.error is None
        assert calls == [(HOOK_URL, {"json": card})]

    @pytest.mark.asyncio
    async def test_post_http_error(self):
        with patch("relay.adapters.webhook.teams_webhook.aiohttp.ClientSession",
                   _mock_aiohttp_session(status=400, body="Bad payload")):
            result = await TeamsWebhookClient(HOOK_URL).post({})
        assert result.success is False
        assert "400" in result.error
        assert "Bad payload" in result.error

    @pytest.mark.asyncio
    async def test_post_network_error(self):
        with patch("relay.adapters.webhook.teams_webhook.aiohttp.ClientSession",
                   _mock_aiohttp_session(error=aiohttp.ClientConnectionError("refused"))):
            result = await TeamsWebhookClient(HOOK_URL).post({})
        assert result.success is False
        assert "refused" in result.error

    @pytest.mark.asyncio
    async def test_unconfigured_makes_no_request(self):
        session = MagicMock()
        with patch("relay.adapters.webhook.teams_webhook.aiohttp.ClientSession", session):
            result = await TeamsWebhookClient("").post({})
        assert result.success is False
        assert "not configured" in result.error
        session.assert_not_called()
