"""FastAPI app for the conversational bot (Bot Framework messaging endpoint)."""

import asyncio
from typing import Dict, Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from relay.adapters.botframework.activity import Activity
from relay.adapters.botframework.adapter import BotFrameworkAdapter
from relay.adapters.botframework.auth import AuthenticationError
from relay.adapters.web.health import HealthResponse, health, utc_timestamp
from relay.config import RelayConfig
from relay.infrastructure.log import StderrLogger
from relay.ports.outbound import LogPort


class RootResponse(BaseModel):
    message: str
    timestamp: str
    endpoints: Dict[str, str]


def create_bot_app(
    config: RelayConfig,
    adapter: BotFrameworkAdapter,
    log: Optional[LogPort] = None,
    discord_client=None,
) -> FastAPI:
    log = log or StderrLogger("bot-server")
    app = FastAPI(title="Teams Claude Bot", version="1.0.0")

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        return health()

    @app.get("/", response_model=RootResponse)
    async def root():
        return RootResponse(
            message="Teams Claude Bot ist online!",
            timestamp=utc_timestamp(),
            endpoints={"messages": "/api/messages", "health": "/health"},
        )

    @app.post("/api/messages")
    async def messages(request: Request):
        """Bot Framework messaging endpoint."""
        try:
            activity = Activity.model_validate(await request.json())
            await adapter.process(activity, request.headers.get("authorization"))
        except AuthenticationError as e:
            log.error("activity rejected", error=str(e))
            return JSONResponse(status_code=401, content={"error": "Unauthorized"})
        except Exception as e:
            log.error("message processing error", error=str(e))
            return JSONResponse(status_code=500, content={"error": "Internal server error"})
        return Response(status_code=200)

    @app.on_event("startup")
    async def startup_event():
        log.info("server starting", port=config.port)
        log.info("bot endpoint", url=f"http://localhost:{config.port}/api/messages")
        log.info("Claude API", configured=config.claude_configured)

        if discord_client is not None:
            log.info("starting Discord client")

            async def _start_discord():
                try:
                    await discord_client.start(config.discord_bot_token)
                except Exception as e:
                    log.error("Discord client failed to start", error=str(e))

            app.state.discord_task = asyncio.create_task(_start_discord())

        log.info("bot ready")

    @app.on_event("shutdown")
    async def shutdown_event():
        if discord_client is not None and not discord_client.is_closed():
            await discord_client.close()
        log.info("server stopped")

    return app
