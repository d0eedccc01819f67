"""Integration tests for components working together as a system.

Coverage:
    - API endpoints through httpx ASGITransport
    - PDF extraction with generated documents
    - Full chat workflow from upload to reply

The completion API is the only stubbed collaborator.
"""
