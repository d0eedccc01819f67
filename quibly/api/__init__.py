"""FastAPI endpoints for the PDF chat assistant.

Endpoints:
    - GET /health: Service health status
    - POST /chat: Send a message, get the assistant's reply
    - POST /upload/pdf: Attach a PDF's text to a session
    - GET /sessions/{id}: Conversation and attached document of a session
"""

from quibly.api.app import app, create_app

__all__ = ["app", "create_app"]
