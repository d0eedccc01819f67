"""Chat and session endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from quibly.conversation.session import SessionRegistry, get_session_registry
from quibly.models.schemas import ChatRequest, ChatResponse, SessionInfo

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    registry: Annotated[SessionRegistry, Depends(get_session_registry)],
) -> ChatResponse:
    """Send a message and return the assistant's reply.

    Upstream failures do not produce an error status; the reply is then a
    fixed fallback message, appended to the conversation like any other.

    Raises:
        409: The session is still waiting for a previous reply.
        422: Message is missing or blank.
    """
    session = registry.get_or_create(request.session_id)

    if session.state.loading:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A reply is already in progress for this session",
        )

    reply = await session.send_message(request.message)
    if reply is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail="Message must not be blank",
        )

    return ChatResponse(
        response=reply.content,
        session_id=session.session_id,
        messages=list(session.state.messages),
    )


@router.get("/sessions/{session_id}", response_model=SessionInfo)
async def get_session(
    session_id: str,
    registry: Annotated[SessionRegistry, Depends(get_session_registry)],
) -> SessionInfo:
    """Return the conversation and attached document for a session."""
    session = registry.get(session_id)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session {session_id} not found",
        )

    return SessionInfo(
        session_id=session.session_id,
        messages=list(session.state.messages),
        document_name=session.state.document_name,
        loading=session.state.loading,
    )


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(
    session_id: str,
    registry: Annotated[SessionRegistry, Depends(get_session_registry)],
) -> None:
    """Forget a session and its conversation. Called when the chat page closes."""
    if not registry.remove(session_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session {session_id} not found",
        )
