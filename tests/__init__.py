"""Test package for Quibly.

Structure:
    - unit/: Individual function and class tests
    - integration/: HTTP API workflow tests

PDFs are generated in memory by the make_pdf fixture. The completion API
is always stubbed with an httpx MockTransport; no test needs an API key.
Leverages pytest with pytest-check for soft assertions.
"""
