"""Submit logic for the chat widget, independent of the UI toolkit.

The widget page renders bubbles through a Transcript; this module decides
which bubbles to show, posts the request and applies the final reply.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

import httpx

logger = logging.getLogger(__name__)

RELAY_ENDPOINT = "/api/openai-responses"

VALIDATION_PROMPT = "Please enter a message or upload a file!"
PENDING_TEXT = "Thinking..."
EMPTY_REPLY_TEXT = "No response from GPT."
ERROR_TEXT = "⚠️ Error communicating with GPT!"


class BubbleKind(str, Enum):
    """Kinds of transcript bubbles."""

    USER = "user"
    FILE = "file"
    BOT = "bot"


class SubmitOutcome(str, Enum):
    """Terminal state of one submission."""

    BLOCKED = "blocked"
    REPLIED = "replied"
    FAILED = "failed"


@dataclass(frozen=True)
class PendingFile:
    """A file picked in the widget, waiting to be sent."""

    name: str
    mime_type: str
    content: bytes


class StagedFile:
    """The single file waiting in the widget's uploader, if any."""

    def __init__(self) -> None:
        self.current: PendingFile | None = None

    def stage(self, file: PendingFile) -> None:
        self.current = file

    def discard(self) -> None:
        self.current = None


class Bubble(Protocol):
    def set_text(self, text: str) -> None: ...


class Transcript(Protocol):
    def add_bubble(self, kind: BubbleKind, text: str) -> Bubble: ...


def file_label(file: PendingFile) -> str:
    return f"📄 {file.name}"


class WidgetClient:
    """Sends widget submissions to the relay and renders the outcome.

    Each call to ``submit`` is independent: there is no locking and no
    de-duplication, so overlapping submissions each get their own
    placeholder bubble.
    """

    def __init__(
        self,
        transcript: Transcript,
        base_url: str,
        *,
        on_alert: Callable[[str], None],
        on_clear: Callable[[], None],
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            transcript: Where bubbles are rendered.
            base_url: Base URL of the relay server.
            on_alert: Shows a validation prompt to the user.
            on_clear: Clears the message and file inputs.
            transport: Optional httpx transport (tests inject a mock).
        """
        self._transcript = transcript
        self._base_url = base_url
        self._on_alert = on_alert
        self._on_clear = on_clear
        self._transport = transport

    async def submit(self, message: str, file: PendingFile | None) -> SubmitOutcome:
        """Submit a message and/or file.

        Args:
            message: Raw input text; surrounding whitespace is dropped.
            file: Optional file picked by the user.

        Returns:
            BLOCKED when nothing was entered, otherwise REPLIED or FAILED.
        """
        text = message.strip()
        if not text and file is None:
            self._on_alert(VALIDATION_PROMPT)
            return SubmitOutcome.BLOCKED

        if text:
            self._transcript.add_bubble(BubbleKind.USER, text)
        if file is not None:
            self._transcript.add_bubble(BubbleKind.FILE, file_label(file))
        placeholder = self._transcript.add_bubble(BubbleKind.BOT, PENDING_TEXT)

        try:
            reply = await self._post(text, file)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error: {e}")
            placeholder.set_text(ERROR_TEXT)
            outcome = SubmitOutcome.FAILED
        else:
            placeholder.set_text(reply or EMPTY_REPLY_TEXT)
            outcome = SubmitOutcome.REPLIED

        self._on_clear()
        return outcome

    async def _post(self, message: str, file: PendingFile | None) -> str:
        # A part without a filename is a plain form field; sending the message
        # this way keeps the body multipart even when no file is attached
        parts: list[tuple[str, tuple]] = [("message", (None, message.encode("utf-8")))]
        if file is not None:
            parts.append(("file", (file.name, file.content, file.mime_type)))

        # No deadline: the request runs until it completes or fails
        async with httpx.AsyncClient(
            base_url=self._base_url, transport=self._transport, timeout=None
        ) as client:
            response = await client.post(RELAY_ENDPOINT, files=parts)
            response.raise_for_status()
            data = response.json()

        reply = data.get("reply") if isinstance(data, dict) else None
        return str(reply) if reply else ""
