"""Chat sessions: one conversation, its pending PDF text, and the send flow.

A session's state is replaced, never edited. Each replacement happens in a
single synchronous step on the event loop, so readers between awaits
always see a consistent conversation.

Only one send per session should be in flight. That is the caller's job:
the UI disables its send button and the API answers 409 while
ChatState.loading is set. Nothing here queues or locks.
"""

import logging
import uuid

from quibly.completion.client import CompletionClient, get_completion_client
from quibly.conversation.formatter import format_request
from quibly.conversation.store import (
    append_message,
    attach_document,
    new_message,
    set_loading,
)
from quibly.models.chat import ChatState, Message, Role
from quibly.parsing.pdf_parser import PDFContent, parse_pdf

logger = logging.getLogger(__name__)


class ChatSession:
    """A single user's conversation with the assistant."""

    def __init__(self, session_id: str, client: CompletionClient) -> None:
        self.session_id = session_id
        self.state = ChatState()
        self._client = client

    async def send_message(self, text: str) -> Message | None:
        """Send a user message and append the assistant's reply.

        Args:
            text: The message as typed.

        Returns:
            The assistant message, or None if text was blank (nothing sent).
        """
        if not text.strip():
            return None

        self.state = set_loading(append_message(self.state, new_message(Role.USER, text)), True)
        request = format_request(self.state.messages, self.state.document_context)

        try:
            reply_text = await self._client.send(request)
            reply = new_message(Role.ASSISTANT, reply_text)
            self.state = append_message(self.state, reply)
        finally:
            self.state = set_loading(self.state, False)

        return reply

    async def upload_document(
        self,
        filename: str,
        content: bytes,
        content_type: str | None,
    ) -> PDFContent:
        """Extract a PDF and make it the pending document context.

        On any failure the session state is left exactly as it was.

        Raises:
            InvalidDocumentType: If the file is not a PDF.
            ExtractionFailed: If the PDF cannot be decoded.
        """
        pdf_content = await parse_pdf(content, content_type)
        self.attach_pdf(filename, pdf_content)
        return pdf_content

    def attach_pdf(self, filename: str, pdf_content: PDFContent) -> None:
        """Make already-extracted PDF text the pending document context."""
        self.state = attach_document(self.state, filename, pdf_content.text)
        logger.info(f"Attached {filename} ({pdf_content.pages} pages) to session {self.session_id}")


class SessionRegistry:
    """In-memory sessions keyed by id. Lost when the process exits."""

    def __init__(self, client: CompletionClient | None = None) -> None:
        self._client = client
        self._sessions: dict[str, ChatSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, session_id: str) -> ChatSession | None:
        return self._sessions.get(session_id)

    def get_or_create(self, session_id: str | None = None) -> ChatSession:
        """Return the session for session_id, creating it if needed.

        A new random id is generated when session_id is None.
        """
        session_id = session_id or str(uuid.uuid4())
        session = self._sessions.get(session_id)
        if session is None:
            # Building the default client requires the API key
            if self._client is None:
                self._client = get_completion_client()
            session = ChatSession(session_id, self._client)
            self._sessions[session_id] = session
            logger.info(f"Created chat session {session_id}")
        return session

    def remove(self, session_id: str) -> bool:
        """Forget a session. Returns False if the id was unknown."""
        if self._sessions.pop(session_id, None) is None:
            return False
        logger.info(f"Removed chat session {session_id}")
        return True


# Module-level singleton instance
_session_registry: SessionRegistry | None = None


def get_session_registry() -> SessionRegistry:
    """Get or create the global session registry."""
    global _session_registry
    if _session_registry is None:
        _session_registry = SessionRegistry()
    return _session_registry
