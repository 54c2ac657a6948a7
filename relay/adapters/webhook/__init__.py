"""Webhook adapters — Teams incoming webhook."""

from relay.adapters.webhook.teams_webhook import TeamsWebhookClient

__all__ = ["TeamsWebhookClient"]
