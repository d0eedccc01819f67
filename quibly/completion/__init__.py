"""Completion API access for the chat assistant.

Responsibilities:
    - Configuration of the Gemini endpoint, model and API key
    - One generateContent call per question
    - Mapping empty or failed responses to fixed fallback replies

Maintains clean separation from the HTTP layer and from conversation state.
"""

from quibly.completion.client import (
    ERROR_FALLBACK,
    NO_ANSWER_FALLBACK,
    CompletionClient,
    UpstreamRequestFailed,
    get_completion_client,
)
from quibly.completion.config import CompletionConfig, get_completion_config

__all__ = [
    "ERROR_FALLBACK",
    "NO_ANSWER_FALLBACK",
    "CompletionClient",
    "CompletionConfig",
    "UpstreamRequestFailed",
    "get_completion_client",
    "get_completion_config",
]
