"""Integration tests for the FastAPI app working as a system.

Coverage:
    - Relay endpoint with real multipart requests
    - Page, script and static routes
    - Widget client talking to the app in-process
    - Live upstream call (when OPENAI_API_KEY is configured)
"""
