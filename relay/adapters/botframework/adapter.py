"""Bot Framework adapter — dispatches activities to RelayBot."""

from typing import Optional

from relay.adapters.botframework.activity import (
    CONVERSATION_UPDATE,
    MESSAGE,
    TYPING,
    Activity,
    reply_activity,
)
from relay.adapters.botframework.auth import BotFrameworkAuthenticator
from relay.adapters.botframework.connector import BotFrameworkConnector
from relay.domain.bot import RelayBot
from relay.infrastructure.log import StderrLogger
from relay.ports.inbound import IncomingMessage
from relay.ports.outbound import LogPort


class BotFrameworkTurn:
    """TurnPort bound to one inbound activity."""

    def __init__(self, activity: Activity, connector: BotFrameworkConnector):
        self.activity = activity
        self._connector = connector

    async def send_text(self, text: str) -> None:
        await self._connector.send(self.activity, reply_activity(self.activity, MESSAGE, text))

    async def send_typing(self) -> None:
        await self._connector.send(self.activity, reply_activity(self.activity, TYPING))


class BotFrameworkAdapter:
    def __init__(
        self,
        bot: RelayBot,
        connector: BotFrameworkConnector,
        log: Optional[LogPort] = None,
        authenticator: Optional[BotFrameworkAuthenticator] = None,
    ):
        self._bot = bot
        self._connector = connector
        self._log = log or StderrLogger("botframework")
        self._auth = authenticator or BotFrameworkAuthenticator()

    async def process(self, activity: Activity, authorization: Optional[str] = None) -> None:
        """Authenticate, then run one turn.

        Raises AuthenticationError before anything is sent. Errors from the
        bot hooks go to RelayBot.on_turn_error.
        """
        await self._auth.authenticate(authorization, activity.service_url)
        turn = BotFrameworkTurn(activity, self._connector)
        try:
            if activity.type == MESSAGE:
                incoming = IncomingMessage(text=activity.text or "", channel_ref=activity.conversation_id)
                await self._bot.on_message(incoming, turn)
            elif activity.type == CONVERSATION_UPDATE and activity.members_added:
                member_ids = [m.id for m in activity.members_added]
                await self._bot.on_members_added(member_ids, activity.bot_id, turn)
            else:
                self._log.info("activity ignored", type=activity.type)
        except Exception as e:
            await self._bot.on_turn_error(e, turn)
