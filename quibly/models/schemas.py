from pydantic import BaseModel, Field, field_validator

from quibly.models.chat import Message


class ChatRequest(BaseModel):
    """Request payload for the chat endpoint.

    Attributes:
        message: User's question or prompt.
        session_id: Optional session for conversation continuity.
    """

    message: str = Field(..., min_length=1)
    session_id: str | None = None

    @field_validator("message")
    @classmethod
    def reject_blank_message(cls, v: str) -> str:
        """Reject whitespace-only messages; the text itself is kept as typed."""
        if not v.strip():
            raise ValueError("Message must not be blank")
        return v


class ChatResponse(BaseModel):
    """Assistant reply plus the full conversation after it.

    Attributes:
        response: The assistant's reply text (or a fallback message).
        session_id: Session identifier for follow-up questions.
        messages: The whole conversation in order.
    """

    response: str
    session_id: str
    messages: list[Message]


class PDFUploadResponse(BaseModel):
    """Response after a PDF was extracted and attached.

    Attributes:
        filename: Name of the uploaded file.
        pages: Number of pages in the document.
        session_id: Session the document is attached to.
        metadata: Document info fields found in the PDF (title, author, ...).
    """

    filename: str
    pages: int
    session_id: str
    metadata: dict[str, str] = Field(default_factory=dict)


class SessionInfo(BaseModel):
    """Snapshot of a chat session."""

    session_id: str
    messages: list[Message]
    document_name: str | None = None
    loading: bool = False
