"""Configuration — loaded once from the environment, read-only afterwards."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

CLAUDE_API_URL = "https://api.anthropic.com/v1/messages"
CLAUDE_API_VERSION = "2023-06-01"
DEFAULT_CLAUDE_MODEL = "claude-sonnet-4-5-20250929"
DEFAULT_MAX_TOKENS = 500
DEFAULT_TIMEOUT_SECONDS = 30.0

BOT_DEFAULT_PORT = 3978
RELAY_DEFAULT_PORT = 3000


@dataclass(frozen=True)
class RelayConfig:
    """Process-wide settings shared by the bot and the webhook relay."""

    port: int = RELAY_DEFAULT_PORT
    claude_api_key: str = ""
    teams_webhook_url: str = ""
    microsoft_app_id: str = ""
    microsoft_app_password: str = ""
    discord_bot_token: str = ""
    claude_model: str = DEFAULT_CLAUDE_MODEL
    claude_max_tokens: int = DEFAULT_MAX_TOKENS
    claude_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def claude_configured(self) -> bool:
        return bool(self.claude_api_key)

    @property
    def webhook_configured(self) -> bool:
        return bool(self.teams_webhook_url)

    @property
    def botframework_auth_configured(self) -> bool:
        return bool(self.microsoft_app_id and self.microsoft_app_password)

    @property
    def discord_configured(self) -> bool:
        return bool(self.discord_bot_token) and self.discord_bot_token != "your_token_here"

    @classmethod
    def from_env(cls, default_port: int = RELAY_DEFAULT_PORT) -> "RelayConfig":
        """Create RelayConfig from environment variables."""
        return cls(
            port=int(os.getenv("PORT") or default_port),
            claude_api_key=os.getenv("CLAUDE_API_KEY", "").strip(),
            teams_webhook_url=os.getenv("TEAMS_WEBHOOK_URL", "").strip(),
            microsoft_app_id=os.getenv("MicrosoftAppId", ""),
            microsoft_app_password=os.getenv("MicrosoftAppPassword", ""),
            discord_bot_token=os.getenv("DISCORD_BOT_TOKEN", ""),
            claude_model=os.getenv("CLAUDE_MODEL", DEFAULT_CLAUDE_MODEL),
        )
