"""Health payloads shared by both services."""

from datetime import datetime, timezone

from pydantic import BaseModel

from relay.config import RelayConfig


class HealthResponse(BaseModel):
    status: str
    timestamp: str


class ConfigFlags(BaseModel):
    claudeConfigured: bool
    teamsConfigured: bool


class RelayHealthResponse(HealthResponse):
    config: ConfigFlags


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def health() -> HealthResponse:
    return HealthResponse(status="healthy", timestamp=utc_timestamp())


def relay_health(config: RelayConfig) -> RelayHealthResponse:
    """Presence flags only, never the configured values."""
    return RelayHealthResponse(
        status="healthy",
        timestamp=utc_timestamp(),
        config=ConfigFlags(
            claudeConfigured=config.claude_configured,
            teamsConfigured=config.webhook_configured,
        ),
    )
