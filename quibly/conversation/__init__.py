"""Conversation state, request formatting and chat sessions.

Responsibilities:
    - Append-only message history held in an immutable ChatState
    - Mapping history plus pending PDF text into completion turns
    - The send and upload flows of a single session
    - An in-memory registry of sessions
"""

from quibly.conversation.formatter import DOCUMENT_SEPARATOR, format_request
from quibly.conversation.session import ChatSession, SessionRegistry, get_session_registry
from quibly.conversation.store import (
    append_message,
    attach_document,
    new_message,
    set_loading,
)

__all__ = [
    "DOCUMENT_SEPARATOR",
    "ChatSession",
    "SessionRegistry",
    "append_message",
    "attach_document",
    "format_request",
    "get_session_registry",
    "new_message",
    "set_loading",
]
