"""Discord adapter — bridges discord.Client to RelayBot.

Answers direct messages and messages that mention the bot, and welcomes
new guild members in the guild's system channel.
"""

import re
from typing import List, Optional

import discord

from relay.domain.bot import RelayBot
from relay.infrastructure.log import StderrLogger
from relay.ports.inbound import IncomingMessage
from relay.ports.outbound import LogPort

DISCORD_MESSAGE_LIMIT = 2000


def split_message(text: str, limit: int = DISCORD_MESSAGE_LIMIT) -> List[str]:
    """Split a message into chunks that fit Discord's character limit."""
    if len(text) <= limit:
        return [text]
    chunks = []
    while text:
        chunks.append(text[:limit])
        text = text[limit:]
    return chunks


class DiscordTurn:
    """TurnPort implementation for a Discord channel."""

    def __init__(self, channel):
        self._channel = channel

    async def send_text(self, text: str) -> None:
        for chunk in split_message(text):
            await self._channel.send(chunk)

    async def send_typing(self) -> None:
        await self._channel.typing()


class DiscordRelayClient(discord.Client):
    """Thin Discord client that delegates to RelayBot."""

    def __init__(self, bot: RelayBot, log: Optional[LogPort] = None, **discord_kwargs):
        intents = discord.Intents.default()
        intents.message_content = True
        intents.members = True
        super().__init__(intents=intents, **discord_kwargs)
        self._bot = bot
        self._log = log or StderrLogger("discord")

    def _is_addressed(self, message: discord.Message) -> bool:
        if isinstance(message.channel, discord.DMChannel):
            return True
        return bool(self.user and self.user.mentioned_in(message))

    def _to_incoming(self, message: discord.Message) -> IncomingMessage:
        text = message.content
        if self.user:
            text = re.sub(rf"<@!?{self.user.id}>", "", text)
        return IncomingMessage(text=text, channel_ref=message.channel.id)

    async def on_ready(self):
        self._log.info("logged in", user=str(self.user))

    async def on_message(self, message: discord.Message):
        if not self.user or message.author == self.user or message.author.bot:
            return
        if not self._is_addressed(message):
            return

        turn = DiscordTurn(message.channel)
        try:
            await self._bot.on_message(self._to_incoming(message), turn)
        except Exception as e:
            await self._bot.on_turn_error(e, turn)

    async def on_member_join(self, member: discord.Member):
        channel = member.guild.system_channel
        if channel is None:
            return
        turn = DiscordTurn(channel)
        bot_id = str(self.user.id) if self.user else None
        try:
            await self._bot.on_members_added([str(member.id)], bot_id, turn)
        except Exception as e:
            await self._bot.on_turn_error(e, turn)
