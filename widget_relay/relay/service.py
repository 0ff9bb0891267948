"""Upstream relay to the OpenAI Responses API.

Wraps the OpenAI SDK behind a small service so the HTTP layer only deals with
ChatRequest in and reply text out. The service holds no per-request state;
the AsyncOpenAI client is shared by all requests.
"""

import logging
from typing import Any

from openai import AsyncOpenAI

from widget_relay.config import RelayConfig, get_relay_config
from widget_relay.models.schemas import ChatRequest, build_content

logger = logging.getLogger(__name__)


class RelayService:
    """Service forwarding chat requests to the upstream model.

    Wraps AsyncOpenAI with:
    - Content shaping from ChatRequest
    - Singleton lifecycle management
    """

    def __init__(self, config: RelayConfig | None = None) -> None:
        """Initialize the relay service.

        Args:
            config: Optional relay configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_relay_config()
        self._client = AsyncOpenAI(api_key=self._config.openai_api_key)

    @property
    def model_name(self) -> str:
        return self._config.model_name

    def build_input(self, request: ChatRequest) -> list[dict[str, Any]]:
        """Build the ``input`` argument of the upstream call.

        Args:
            request: The chat request to forward.

        Returns:
            A single user turn whose content is the shaped block list.
        """
        content = [block.model_dump() for block in build_content(request)]
        return [{"role": "user", "content": content}]

    async def respond(self, request: ChatRequest) -> str:
        """Send a request upstream and return the reply text.

        Exceptions from the SDK propagate unchanged; the caller decides
        how to report them.

        Args:
            request: The chat request to forward.

        Returns:
            The upstream output text.
        """
        if request.file is not None:
            logger.info(
                f"Relaying message with file {request.file.name} "
                f"({request.file.mime_type}, {len(request.file.content)} bytes)"
            )
        else:
            logger.info("Relaying text-only message")

        response = await self._client.responses.create(
            model=self._config.model_name,
            input=self.build_input(request),
        )
        return response.output_text


# Module-level singleton instance
_relay_service: RelayService | None = None


def get_relay_service() -> RelayService:
    """Get or create the global relay service.

    Returns:
        The RelayService instance.

    Raises:
        pydantic.ValidationError: If OPENAI_API_KEY is not set.
    """
    global _relay_service
    if _relay_service is None:
        _relay_service = RelayService()
    return _relay_service
