"""RelayService — form message → Claude → Teams webhook card."""

from dataclasses import dataclass
from typing import Optional

from relay.domain.card import build_message_card, format_exchange
from relay.domain.responder import ResponseGenerator
from relay.infrastructure.log import StderrLogger
from relay.ports.outbound import LogPort, WebhookPort


@dataclass
class RelayOutcome:
    response: str
    ai_generated: bool
    delivered: bool
    webhook_configured: bool = True


class RelayService:
    def __init__(
        self,
        responder: ResponseGenerator,
        webhook: WebhookPort,
        log: Optional[LogPort] = None,
    ):
        self._responder = responder
        self._webhook = webhook
        self._log = log or StderrLogger("relay")

    async def relay(self, message: str) -> RelayOutcome:
        """Generate an answer for ``message`` and post it as a card.

        A missing webhook URL or a failed post is logged, not raised; the
        caller still receives the generated text.
        """
        self._log.info("message received", text=message)
        reply = await self._responder.generate(message)

        if not self._webhook.is_configured:
            self._log.error("Teams webhook URL not configured, skipping delivery")
            return RelayOutcome(
                response=reply.text,
                ai_generated=reply.from_ai,
                delivered=False,
                webhook_configured=False,
            )

        card = build_message_card(format_exchange(message, reply.text))
        result = await self._webhook.post(card)
        if result.success:
            self._log.info("card sent to Teams")
        else:
            self._log.error("Teams webhook failed", error=result.error)
        return RelayOutcome(response=reply.text, ai_generated=reply.from_ai, delivered=result.success)
