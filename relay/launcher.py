"""Entry points: wire components from RelayConfig and serve with uvicorn.

Usage:
    relay-bot            # Bot Framework endpoint (+ Discord if configured)
    relay-webhook        # web form → Teams webhook relay
    python -m relay.launcher bot|relay
"""

import asyncio
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI

from relay.adapters.botframework import (
    BotFrameworkAdapter,
    BotFrameworkAuthenticator,
    BotFrameworkConnector,
)
from relay.adapters.llm import create_llm
from relay.adapters.web import create_bot_app, create_relay_app
from relay.adapters.webhook import TeamsWebhookClient
from relay.config import BOT_DEFAULT_PORT, RELAY_DEFAULT_PORT, RelayConfig
from relay.domain.bot import RelayBot
from relay.domain.relay import RelayService
from relay.domain.responder import bot_responder, relay_responder
from relay.infrastructure.log import StderrLogger


def build_bot_app(config: RelayConfig, log: Optional[StderrLogger] = None) -> FastAPI:
    log = log or StderrLogger("bot")
    llm = create_llm(config)
    bot = RelayBot(bot_responder(llm, log.child("responder")), log.child("turn"))
    connector = BotFrameworkConnector(
        app_id=config.microsoft_app_id,
        app_password=config.microsoft_app_password,
    )
    adapter = BotFrameworkAdapter(
        bot,
        connector,
        log.child("botframework"),
        authenticator=BotFrameworkAuthenticator(config.microsoft_app_id),
    )

    discord_client = None
    if config.discord_configured:
        from relay.adapters.discord import DiscordRelayClient
        discord_client = DiscordRelayClient(bot, log.child("discord"))
    else:
        log.info("Discord client not configured (set DISCORD_BOT_TOKEN in .env)")

    return create_bot_app(config, adapter, log.child("server"), discord_client=discord_client)


def build_relay_app(config: RelayConfig, log: Optional[StderrLogger] = None) -> FastAPI:
    log = log or StderrLogger("relay")
    service = RelayService(
        relay_responder(create_llm(config), log.child("responder")),
        TeamsWebhookClient(config.teams_webhook_url),
        log.child("service"),
    )
    return create_relay_app(config, service, log.child("server"))


def install_error_hooks(log: StderrLogger, loop: Optional[asyncio.AbstractEventLoop] = None):
    """Log unhandled exceptions; the service keeps running after async ones."""

    def _excepthook(exc_type, exc, tb):
        log.error("uncaught exception", error=f"{exc_type.__name__}: {exc}")

    def _loop_handler(_loop, context):
        exc = context.get("exception")
        log.error("unhandled async error", error=str(exc or context.get("message")))

    sys.excepthook = _excepthook
    if loop is not None:
        loop.set_exception_handler(_loop_handler)


def _serve(app: FastAPI, port: int, log: StderrLogger):
    async def _main():
        install_error_hooks(log, asyncio.get_running_loop())
        server = uvicorn.Server(uvicorn.Config(app, host="0.0.0.0", port=port, log_level="info"))
        await server.serve()

    asyncio.run(_main())


def run_bot():
    log = StderrLogger("bot")
    config = RelayConfig.from_env(default_port=BOT_DEFAULT_PORT)
    _serve(build_bot_app(config, log), config.port, log)


def run_relay():
    log = StderrLogger("relay")
    config = RelayConfig.from_env(default_port=RELAY_DEFAULT_PORT)
    _serve(build_relay_app(config, log), config.port, log)


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    mode = args[0] if args else "bot"
    if mode == "bot":
        run_bot()
    elif mode in ("relay", "webhook"):
        run_relay()
    else:
        print(f"Unknown mode {mode!r}, expected 'bot' or 'relay'", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
