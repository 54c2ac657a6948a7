"""Tests for the Discord adapter."""

from unittest.mock import AsyncMock, MagicMock, PropertyMock, patch

import discord
import pytest

from relay.adapters.discord.adapter import DiscordRelayClient, DiscordTurn, split_message
from relay.ports.inbound import IncomingMessage, TurnPort


class TestSplitMessage:
    def test_short(self):
        assert split_message("hello") == ["hello"]

    def test_long(self):
        chunks = split_message("a" * 4500)
        assert [len(c) for c in chunks] == [2000, 2000, 500]


class TestDiscordTurn:
    def test_implements_port(self):
        assert isinstance(DiscordTurn(MagicMock()), TurnPort)

    @pytest.mark.asyncio
    async def test_send_text_chunks(self):
        channel = MagicMock()
        channel.send = AsyncMock()
        await DiscordTurn(channel).send_text("b" * 2500)
        assert channel.send.await_count == 2

    @pytest.mark.asyncio
    async def test_send_typing(self):
        channel = MagicMock()
        channel.typing = AsyncMock()
        await DiscordTurn(channel).send_typing()
        channel.typing.assert_awaited_once()


def _bot():
    bot = MagicMock()
    bot.on_message = AsyncMock()
    bot.on_members_added = AsyncMock()
    bot.on_turn_error = AsyncMock()
    return bot


def _me(mentioned=False):
    me = MagicMock()
    me.id = 42
    me.mentioned_in.return_value = mentioned
    return me


def _message(content, channel=None, author_bot=False):
    msg = MagicMock()
    msg.content = content
    msg.author.bot = author_bot
    msg.channel = channel or MagicMock()
    msg.channel.id = 7
    return msg


class TestDiscordRelayClient:
    @pytest.mark.asyncio
    async def test_mention_is_stripped_and_dispatched(self):
        bot = _bot()
        client = DiscordRelayClient(bot, MagicMock())
        with patch.object(DiscordRelayClient, "user", new_callable=PropertyMock) as user:
            user.return_value = _me(mentioned=True)
            await client.on_message(_message("<@42> hallo"))
        incoming, turn = bot.on_message.await_args.args
        assert incoming == IncomingMessage(text=" hallo", channel_ref=7)
        assert isinstance(turn, DiscordTurn)

    @pytest.mark.asyncio
    async def test_unaddressed_guild_message_ignored(self):
        bot = _bot()
        client = DiscordRelayClient(bot, MagicMock())
        with patch.object(DiscordRelayClient, "user", new_callable=PropertyMock) as user:
            user.return_value = _me(mentioned=False)
            await client.on_message(_message("hallo"))
        bot.on_message.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_direct_message_answered(self):
        bot = _bot()
        client = DiscordRelayClient(bot, MagicMock())
        dm = MagicMock(spec=discord.DMChannel)
        with patch.object(DiscordRelayClient, "user", new_callable=PropertyMock) as user:
            user.return_value = _me(mentioned=False)
            await client.on_message(_message("hallo", channel=dm))
        bot.on_message.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_bot_authors_ignored(self):
        bot = _bot()
        client = DiscordRelayClient(bot, MagicMock())
        with patch.object(DiscordRelayClient, "user", new_callable=PropertyMock) as user:
            user.return_value = _me(mentioned=True)
            await client.on_message(_message("<@42> hi", author_bot=True))
        bot.on_message.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_member_join_welcome(self):
        bot = _bot()
        client = DiscordRelayClient(bot, MagicMock())
        member = MagicMock()
        member.id = 99
        with patch.object(DiscordRelayClient, "user", new_callable=PropertyMock) as user:
            user.return_value = _me()
            await client.on_member_join(member)
        member_ids, bot_id, _ = bot.on_members_added.await_args.args
        assert member_ids == ["99"]
        assert bot_id == "42"

    @pytest.mark.asyncio
    async def test_member_join_without_system_channel(self):
        bot = _bot()
        client = DiscordRelayClient(bot, MagicMock())
        member = MagicMock()
        member.guild.system_channel = None
        await client.on_member_join(member)
        bot.on_members_added.assert_not_awaited()
