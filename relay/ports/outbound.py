"""Outbound ports — interfaces for external system adapters."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, runtime_checkable


@dataclass
class PostResult:
    """Unified result type for webhook post operations."""

    success: bool
    error: Optional[str] = None


@runtime_checkable
class LLMPort(Protocol):
    """Interface for LLM completion backends. Raises on any failure."""

    async def complete(self, message: str) -> str: ...


@runtime_checkable
class WebhookPort(Protocol):
    """Interface for chat-notification webhooks."""

    @property
    def is_configured(self) -> bool: ...

    async def post(self, payload: Dict[str, Any]) -> PostResult: ...


@runtime_checkable
class LogPort(Protocol):
    def info(self, msg: str, **fields: Any) -> None: ...
    def error(self, msg: str, **fields: Any) -> None: ...
