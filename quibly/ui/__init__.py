"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Chat bubbles for the conversation, with a typing indicator
    - PDF picker that forwards uploads to the API
    - Disabling input while a reply is pending

Contains minimal business logic. Delegates all operations to the API.
"""
