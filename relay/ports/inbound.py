"""Inbound ports — platform-agnostic message and turn representation."""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass
class IncomingMessage:
    """Teams/Discord-agnostic message representation.

    channel_ref is whatever the platform adapter needs to answer in the
    same conversation; the domain never looks inside it.
    """

    text: str
    channel_ref: Any = None


@runtime_checkable
class TurnPort(Protocol):
    """Send primitives bound to the conversation a message came from."""

    async def send_text(self, text: str) -> None: ...
    async def send_typing(self) -> None: ...
