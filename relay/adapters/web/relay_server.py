"""FastAPI app for the web-form → Claude → Teams webhook relay."""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from relay.adapters.web.form_page import FORM_PAGE
from relay.adapters.web.health import RelayHealthResponse, relay_health
from relay.config import RelayConfig
from relay.domain.relay import RelayService
from relay.infrastructure.log import StderrLogger
from relay.ports.outbound import LogPort

MESSAGE_REQUIRED = "Nachricht ist erforderlich"
INTERNAL_ERROR = "Interner Serverfehler"


class SendRequest(BaseModel):
    message: Optional[str] = None


class SendResponse(BaseModel):
    success: bool
    message: str
    response: str
    aiGenerated: bool
    delivered: bool


def _status_text(delivered: bool, webhook_configured: bool) -> str:
    if delivered:
        return "Nachricht erfolgreich an Teams gesendet"
    if not webhook_configured:
        return "Antwort generiert, Teams Webhook ist nicht konfiguriert"
    return "Antwort generiert, Zustellung an Teams fehlgeschlagen"


def create_relay_app(
    config: RelayConfig,
    service: RelayService,
    log: Optional[LogPort] = None,
) -> FastAPI:
    log = log or StderrLogger("relay-server")
    app = FastAPI(title="Claude Teams Relay")

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        """Missing, non-JSON or mistyped bodies all get the form's 400."""
        return JSONResponse(status_code=400, content={"error": MESSAGE_REQUIRED})

    @app.get("/", response_class=HTMLResponse)
    async def root():
        """Web form"""
        return FORM_PAGE

    @app.get("/health", response_model=RelayHealthResponse)
    async def health_check():
        return relay_health(config)

    @app.post("/send", response_model=SendResponse)
    async def send(req: SendRequest):
        message = (req.message or "").strip()
        if not message:
            return JSONResponse(status_code=400, content={"error": MESSAGE_REQUIRED})
        try:
            outcome = await service.relay(message)
        except Exception as e:
            log.error("relay failed", error=str(e))
            return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})
        return SendResponse(
            success=True,
            message=_status_text(outcome.delivered, outcome.webhook_configured),
            response=outcome.response,
            aiGenerated=outcome.ai_generated,
            delivered=outcome.delivered,
        )

    @app.on_event("startup")
    async def startup_event():
        log.info("server starting", port=config.port)
        log.info("web interface", url=f"http://localhost:{config.port}")
        log.info("Claude API", configured=config.claude_configured)
        log.info("Teams webhook", configured=config.webhook_configured)

    @app.on_event("shutdown")
    async def shutdown_event():
        log.info("server stopped")

    return app
