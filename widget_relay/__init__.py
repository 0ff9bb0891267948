"""Widget Relay - embeddable chat widget backed by the OpenAI Responses API.

Combines FastAPI for the relay endpoint, the OpenAI SDK for the upstream call,
NiceGUI for the widget, and Pydantic for data validation.

Components:
    - api: relay endpoint, page routes and the embed script
    - relay: upstream request shaping and invocation
    - ui: the chat widget and its submit logic
    - models: request/response schemas and content blocks
"""

__version__ = "0.1.0"
