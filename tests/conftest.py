"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fakes:
    - FakeRelayService: RelayService stand-in
    - FakeTranscript: list-backed widget transcript

Fixtures:
    - fake_relay: Stand-in for RelayService recording every request
    - async_client: HTTPX client for API testing, relay service overridden
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from widget_relay.api import app
from widget_relay.models.schemas import ChatRequest
from widget_relay.relay.service import get_relay_service
from widget_relay.ui.client import BubbleKind


class FakeRelayService:
    """Records requests and returns a canned reply, or raises."""

    def __init__(self, reply: str = "Hello from the model", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.requests: list[ChatRequest] = []
        self.model_name = "gpt-4.1"

    async def respond(self, request: ChatRequest) -> str:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.reply


class FakeBubble:
    """Transcript bubble recording every text it has shown."""

    def __init__(self, kind: BubbleKind, text: str) -> None:
        self.kind = kind
        self.text = text
        self.history = [text]

    def set_text(self, text: str) -> None:
        self.text = text
        self.history.append(text)


class FakeTranscript:
    def __init__(self) -> None:
        self.bubbles: list[FakeBubble] = []

    def add_bubble(self, kind: BubbleKind, text: str) -> FakeBubble:
        bubble = FakeBubble(kind, text)
        self.bubbles.append(bubble)
        return bubble


@pytest.fixture
def fake_relay() -> FakeRelayService:
    """Return a fresh fake relay service.

    Returns:
        FakeRelayService with a canned reply.
    """
    return FakeRelayService()


@pytest.fixture
async def async_client(fake_relay: FakeRelayService) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    app.dependency_overrides[get_relay_service] = lambda: fake_relay
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
