"""Quibly - ask questions about a PDF in a chat window.

Combines FastAPI for the HTTP API, NiceGUI for the browser UI, pypdf for
text extraction, httpx for the Gemini API, and Pydantic for data validation.

Components:
    - api: HTTP endpoints
    - completion: Gemini generateContent client and configuration
    - conversation: message state, request formatting, chat sessions
    - parsing: PDF extraction
    - ui: Web interface for chat interactions
    - models: Domain, wire and request/response schemas
"""

__version__ = "0.1.0"
