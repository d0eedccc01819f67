"""Pydantic models for conversation state, the completion API and the HTTP API.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Message, ChatState: conversation domain (frozen)
    - Content, GenerateContentRequest/Response: Gemini wire format
    - ChatRequest, ChatResponse, PDFUploadResponse, SessionInfo: HTTP API
"""

from quibly.models.chat import ChatState, Message, Role
from quibly.models.gemini import (
    Candidate,
    Content,
    GenerateContentRequest,
    GenerateContentResponse,
    Part,
)
from quibly.models.schemas import (
    ChatRequest,
    ChatResponse,
    PDFUploadResponse,
    SessionInfo,
)

__all__ = [
    "Candidate",
    "ChatRequest",
    "ChatResponse",
    "ChatState",
    "Content",
    "GenerateContentRequest",
    "GenerateContentResponse",
    "Message",
    "PDFUploadResponse",
    "Part",
    "Role",
    "SessionInfo",
]
