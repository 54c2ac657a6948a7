"""Bot Framework adapter — Teams activities in, replies out."""

from relay.adapters.botframework.activity import Activity, ChannelAccount, ConversationAccount
from relay.adapters.botframework.adapter import BotFrameworkAdapter, BotFrameworkTurn
from relay.adapters.botframework.auth import AuthenticationError, BotFrameworkAuthenticator
from relay.adapters.botframework.connector import BotFrameworkConnector

__all__ = [
    "Activity",
    "ChannelAccount",
    "ConversationAccount",
    "AuthenticationError",
    "BotFrameworkAdapter",
    "BotFrameworkAuthenticator",
    "BotFrameworkConnector",
    "BotFrameworkTurn",
]
