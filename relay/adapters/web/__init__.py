"""Web adapters — FastAPI apps for the bot endpoint and the webhook relay."""

from relay.adapters.web.bot_server import create_bot_app
from relay.adapters.web.relay_server import create_relay_app

__all__ = ["create_bot_app", "create_relay_app"]
