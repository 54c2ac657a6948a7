"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass

PLAIN = "plain"
CARD = "card"


@dataclass
class OutgoingMessage:
    """Reply text on its way to a channel or webhook."""

    text: str
    formatting: str = PLAIN  # PLAIN or CARD


@dataclass
class GeneratedReply:
    """Result of one generation attempt. from_ai is False for fallback text."""

    text: str
    from_ai: bool = False
