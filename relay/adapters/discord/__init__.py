"""Discord adapter — the same bot on a Discord gateway connection."""

from relay.adapters.discord.adapter import DiscordRelayClient, DiscordTurn, split_message

__all__ = ["DiscordRelayClient", "DiscordTurn", "split_message"]
