"""Test package for Widget Relay.

Structure:
    - unit/: Individual function and class tests
    - integration/: HTTP workflow tests against the FastAPI app

Leverages pytest with pytest-check for soft assertions.
"""
