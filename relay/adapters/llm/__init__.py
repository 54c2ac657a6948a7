"""LLM adapters — Claude Messages API client."""

from relay.adapters.llm.claude_api import ClaudeAPIClient, ClaudeAPIError, create_llm

__all__ = ["ClaudeAPIClient", "ClaudeAPIError", "create_llm"]
