"""Unit tests for RelayService.

Tests upstream request construction with a mocked AsyncOpenAI client.
"""

import base64
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from widget_relay.config import RelayConfig
from widget_relay.models.schemas import ChatRequest, UploadedFile


@pytest.fixture
def config() -> RelayConfig:
    return RelayConfig(openai_api_key="sk-test-key")


@pytest.fixture
def mock_openai_class() -> MagicMock:
    """Patch AsyncOpenAI with a client whose responses.create is awaitable."""
    with patch("widget_relay.relay.service.AsyncOpenAI") as mock_class:
        mock_client = MagicMock()
        mock_client.responses.create = AsyncMock(
            return_value=SimpleNamespace(output_text="It is a cat.")
        )
        mock_class.return_value = mock_client
        yield mock_class


class TestRelayServiceInit:
    """Tests for RelayService initialization."""

    def test_service_creates_client_with_api_key(
        self, config: RelayConfig, mock_openai_class: MagicMock
    ) -> None:
        """AsyncOpenAI is created with the configured key."""
        from widget_relay.relay.service import RelayService

        service = RelayService(config=config)

        mock_openai_class.assert_called_once_with(api_key="sk-test-key")
        assert service.model_name == "gpt-4.1"


class TestRelayServiceRespond:
    """Tests for the upstream call."""

    async def test_text_only_request(
        self, config: RelayConfig, mock_openai_class: MagicMock
    ) -> None:
        """Message only sends exactly one input_text block."""
        from widget_relay.relay.service import RelayService

        service = RelayService(config=config)
        reply = await service.respond(ChatRequest.from_form("hello"))

        assert reply == "It is a cat."
        create = mock_openai_class.return_value.responses.create
        create.assert_awaited_once_with(
            model="gpt-4.1",
            input=[
                {
                    "role": "user",
                    "content": [{"type": "input_text", "text": "hello"}],
                }
            ],
        )

    async def test_request_with_file(
        self, config: RelayConfig, mock_openai_class: MagicMock
    ) -> None:
        """Message with file sends a text block and a base64 file block."""
        from widget_relay.relay.service import RelayService

        content = b"\x89PNG fake image bytes"
        upload = UploadedFile(name="a.png", mime_type="image/png", content=content)

        service = RelayService(config=config)
        await service.respond(ChatRequest.from_form("describe", upload))

        call_kwargs = mock_openai_class.return_value.responses.create.call_args.kwargs
        blocks = call_kwargs["input"][0]["content"]
        assert len(blocks) == 2
        assert blocks[0] == {"type": "input_text", "text": "describe"}
        assert blocks[1]["type"] == "input_file"
        assert blocks[1]["file_data"]["name"] == "a.png"
        assert blocks[1]["file_data"]["mime_type"] == "image/png"
        assert blocks[1]["file_data"]["data"] == base64.b64encode(content).decode("ascii")

    async def test_upstream_errors_propagate(
        self, config: RelayConfig, mock_openai_class: MagicMock
    ) -> None:
        """SDK exceptions are not swallowed by the service."""
        from widget_relay.relay.service import RelayService

        mock_openai_class.return_value.responses.create.side_effect = RuntimeError("boom")
        service = RelayService(config=config)

        with pytest.raises(RuntimeError, match="boom"):
            await service.respond(ChatRequest.from_form("hello"))


class TestGetRelayService:
    """Tests for get_relay_service singleton function."""

    def test_singleton_returns_same_instance(self) -> None:
        """get_relay_service returns the same instance on multiple calls."""
        import widget_relay.relay.service as service_module

        # Reset singleton
        service_module._relay_service = None

        try:
            with patch.object(service_module, "RelayService") as mock_service:
                mock_instance = MagicMock()
                mock_service.return_value = mock_instance

                first = service_module.get_relay_service()
                second = service_module.get_relay_service()

                assert first is second
                mock_service.assert_called_once()
        finally:
            service_module._relay_service = None
