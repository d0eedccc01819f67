"""Unit tests for individual components in isolation.

Coverage:
    - conversation/: state transitions, request formatting, sessions
    - completion/: configuration and response handling
    - parsing/: PDF validation and page extraction

Follows single responsibility per test function. Leverages pytest-check
for multiple assertions per test.
"""
