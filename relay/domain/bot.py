"""RelayBot — conversational bot logic, no platform dependencies.

Platform adapters (Bot Framework, Discord) convert their native events
into IncomingMessage / member id lists and call the two hooks below with
a TurnPort bound to the originating conversation.
"""

from typing import Iterable, Optional

from relay.domain.models import OutgoingMessage
from relay.domain.responder import ResponseGenerator
from relay.infrastructure.log import StderrLogger
from relay.ports.inbound import IncomingMessage, TurnPort
from relay.ports.outbound import LogPort

EMPTY_MESSAGE_PROMPT = "Bitte senden Sie eine Textnachricht."

WELCOME_TEXT = (
    "🤖 Hallo! Ich bin Ihr Claude-Bot.\n\n"
    "Schreiben Sie mir einfach eine Nachricht und ich antworte Ihnen mit KI-Power!\n\n"
    "💡 Tipp: Stellen Sie mir Fragen, bitten Sie um Hilfe oder führen Sie einfach ein Gespräch."
)

TURN_ERROR_TEXT = "Entschuldigung, etwas ist schiefgelaufen. Bitte versuchen Sie es erneut."


class RelayBot:
    """Answers each message in the conversation it came from."""

    def __init__(self, responder: ResponseGenerator, log: Optional[LogPort] = None):
        self._responder = responder
        self._log = log or StderrLogger("bot")

    async def on_message(self, message: IncomingMessage, turn: TurnPort) -> None:
        text = (message.text or "").strip()
        if not text:
            await turn.send_text(EMPTY_MESSAGE_PROMPT)
            return

        self._log.info("message received", text=text)

        try:
            await turn.send_typing()
        except Exception as e:
            self._log.error("typing indicator failed", error=str(e))

        reply = await self._responder.generate(text)
        outgoing = OutgoingMessage(text=reply.text)
        try:
            await turn.send_text(outgoing.text)
        except Exception as e:
            self._log.error("reply delivery failed", error=str(e))
            return
        self._log.info("reply sent", from_ai=reply.from_ai)

    async def on_members_added(
        self,
        member_ids: Iterable[str],
        bot_id: Optional[str],
        turn: TurnPort,
    ) -> int:
        """Welcome every added member except the bot itself. Returns the count."""
        sent = 0
        for member_id in member_ids:
            if member_id == bot_id:
                continue
            await turn.send_text(WELCOME_TEXT)
            sent += 1
        return sent

    async def on_turn_error(self, error: Exception, turn: TurnPort) -> None:
        """Last-resort handler for errors escaping the hooks above."""
        self._log.error("turn failed", error=str(error))
        try:
            await turn.send_text(TURN_ERROR_TEXT)
        except Exception as e:
            self._log.error("error notice delivery failed", error=str(e))
