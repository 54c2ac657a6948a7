"""Port interfaces (Hexagonal Architecture)."""

from relay.ports.inbound import IncomingMessage, TurnPort
from relay.ports.outbound import LLMPort, LogPort, PostResult, WebhookPort

__all__ = [
    "IncomingMessage",
    "TurnPort",
    "LLMPort",
    "LogPort",
    "PostResult",
    "WebhookPort",
]
