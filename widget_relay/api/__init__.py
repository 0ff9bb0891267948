"""FastAPI endpoints for the chat widget backend.

Endpoints:
    - POST /api/openai-responses: Relay a message and optional file upstream
    - GET /: Welcome message
    - GET /demo: Demo host page
    - GET /embed.js: Script injecting the widget iframe
    - GET /health: Service health status
    - GET /static/*: Files from the public directory
"""

from widget_relay.api.app import app, create_app

__all__ = ["app", "create_app"]
