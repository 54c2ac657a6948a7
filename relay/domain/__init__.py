"""Domain layer — pure Python, no framework dependencies."""

from relay.domain.bot import RelayBot
from relay.domain.card import build_message_card, format_exchange
from relay.domain.fallback import keyword_reply, relay_failure_reply
from relay.domain.models import CARD, PLAIN, GeneratedReply, OutgoingMessage
from relay.domain.relay import RelayOutcome, RelayService
from relay.domain.responder import ResponseGenerator, bot_responder, relay_responder

__all__ = [
    "CARD",
    "PLAIN",
    "GeneratedReply",
    "OutgoingMessage",
    "RelayBot",
    "RelayOutcome",
    "RelayService",
    "ResponseGenerator",
    "bot_responder",
    "relay_responder",
    "build_message_card",
    "format_exchange",
    "keyword_reply",
    "relay_failure_reply",
]
