"""Conversion of chat history into a generateContent request."""

from collections.abc import Sequence

from quibly.models.chat import Message, Role
from quibly.models.gemini import Content, GenerateContentRequest, Part, TurnRole

DOCUMENT_SEPARATOR = "\n\n[PDF Content]:\n"

_TURN_ROLES: dict[Role, TurnRole] = {
    Role.USER: "user",
    Role.ASSISTANT: "model",
}


def format_request(
    messages: Sequence[Message],
    document_context: str | None = None,
) -> GenerateContentRequest:
    """Build the upstream request for a conversation.

    Every message becomes one turn with a single text part. A non-blank
    document context is appended to the last turn only; the messages
    themselves are left untouched.

    Args:
        messages: Conversation in order, newest last.
        document_context: Extracted PDF text to send with the newest turn.

    Returns:
        Request whose contents mirror messages one to one.
    """
    texts = [message.content for message in messages]

    if texts and document_context and document_context.strip():
        texts[-1] = f"{texts[-1]}{DOCUMENT_SEPARATOR}{document_context}"

    return GenerateContentRequest(
        contents=[
            Content(role=_TURN_ROLES[message.role], parts=[Part(text=text)])
            for message, text in zip(messages, texts, strict=True)
        ]
    )
