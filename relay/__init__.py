"""Claude Teams Relay — chat bot and webhook relay backed by the Claude API."""

__version__ = "0.1.0"
