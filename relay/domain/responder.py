"""Response generator — one Claude call, then a local fallback."""

from typing import Callable, Optional

from relay.domain.fallback import keyword_reply, relay_failure_reply
from relay.domain.models import GeneratedReply
from relay.infrastructure.log import StderrLogger
from relay.ports.outbound import LLMPort, LogPort


class ResponseGenerator:
    """Turns a non-empty message into reply text.

    Makes at most one LLM call per message and never raises: every failure,
    including a missing LLM backend, degrades to ``fallback(message)``.
    """

    def __init__(
        self,
        llm: Optional[LLMPort],
        fallback: Callable[[str], str],
        log: Optional[LogPort] = None,
    ):
        self._llm = llm
        self._fallback = fallback
        self._log = log or StderrLogger("responder")

    @property
    def ai_configured(self) -> bool:
        return self._llm is not None

    async def generate(self, message: str) -> GeneratedReply:
        if self._llm is not None:
            try:
                text = await self._llm.complete(message)
                if text:
                    return GeneratedReply(text=text, from_ai=True)
                self._log.error("LLM returned empty text")
            except Exception as e:
                self._log.error("LLM call failed", error=str(e))
        return GeneratedReply(text=self._fallback(message), from_ai=False)


def bot_responder(llm: Optional[LLMPort], log: Optional[LogPort] = None) -> ResponseGenerator:
    """Conversational variant: canned keyword replies on failure."""
    return ResponseGenerator(llm, keyword_reply, log)


def relay_responder(llm: Optional[LLMPort], log: Optional[LogPort] = None) -> ResponseGenerator:
    """Webhook relay variant: a fixed apology on failure."""
    return ResponseGenerator(llm, relay_failure_reply, log)
