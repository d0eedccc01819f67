"""State transitions for a chat session.

Each function takes a ChatState and returns a new one; nothing is mutated
in place, so a state captured before an await is never changed under it.
"""

from quibly.models.chat import ChatState, Message, Role


def new_message(role: Role, content: str) -> Message:
    """Create a message with a fresh id."""
    return Message(role=role, content=content)


def append_message(state: ChatState, message: Message) -> ChatState:
    """Return a state with message added after all existing messages."""
    return state.model_copy(update={"messages": (*state.messages, message)})


def attach_document(state: ChatState, name: str, text: str) -> ChatState:
    """Replace the pending document context and its display name."""
    return state.model_copy(update={"document_context": text, "document_name": name})


def set_loading(state: ChatState, loading: bool) -> ChatState:
    return state.model_copy(update={"loading": loading})
