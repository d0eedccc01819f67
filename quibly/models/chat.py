"""Conversation domain models.

Messages and the per-session chat state are frozen; every change produces
a new instance (see quibly.conversation.store).
"""

import itertools
import time
from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Seeded from the clock once, then strictly increasing within the process
_message_ids = itertools.count(time.time_ns())


def next_message_id() -> int:
    """Return a fresh message id, unique for the lifetime of the process."""
    return next(_message_ids)


class Role(str, Enum):
    """Speaker of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single chat message.

    Attributes:
        id: Unique, increasing identifier.
        role: Who wrote the message.
        content: The message text.
        created_at: Creation time (UTC).
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(default_factory=next_message_id)
    role: Role
    content: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class ChatState(BaseModel):
    """Everything one chat session knows.

    Attributes:
        messages: Conversation in insertion order.
        document_context: Text extracted from the most recent PDF upload.
        document_name: Display name of that PDF.
        loading: True while a completion request is in flight.
    """

    model_config = ConfigDict(frozen=True)

    messages: tuple[Message, ...] = ()
    document_context: str | None = None
    document_name: str | None = None
    loading: bool = False
