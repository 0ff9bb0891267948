"""Upstream relay for the chat widget.

Responsibilities:
    - Shaping a ChatRequest into Responses API input
    - Invoking the fixed upstream model through AsyncOpenAI
    - Returning the plain output text

Maintains clean separation from the HTTP layer.
"""

from widget_relay.relay.service import RelayService, get_relay_service

__all__ = ["RelayService", "get_relay_service"]
