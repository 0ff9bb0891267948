"""NiceGUI chat widget served at /widget and embedded through /embed.js."""

import logging

from nicegui import events, ui

from widget_relay.config import get_server_settings
from widget_relay.ui.client import BubbleKind, PendingFile, StagedFile, WidgetClient

logger = logging.getLogger(__name__)

WIDGET_HEAD_HTML = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<link href="/static/widget.css" rel="stylesheet">
"""


class ColumnTranscript:
    """Transcript rendering each bubble as a styled label in a column."""

    def __init__(self, container: ui.column) -> None:
        self._container = container

    def add_bubble(self, kind: BubbleKind, text: str) -> ui.label:
        with self._container:
            return ui.label(text).classes(f"message {kind.value}")


@ui.page("/widget")
def widget_page() -> None:
    """Chat widget page."""
    ui.add_head_html(WIDGET_HEAD_HTML)
    settings = get_server_settings()

    staged = StagedFile()

    async def handle_upload(e: events.UploadEventArguments) -> None:
        content = await e.file.read()
        staged.stage(
            PendingFile(
                name=e.file.name,
                mime_type=e.file.content_type or "application/octet-stream",
                content=content,
            )
        )
        logger.debug(f"Staged file {e.file.name} ({len(content)} bytes)")

    def clear_inputs() -> None:
        message_input.value = ""
        staged.discard()
        file_input.reset()

    async def send_message() -> None:
        await client.submit(message_input.value or "", staged.current)

    # === UI Layout ===
    with ui.column().classes("w-full h-screen chat-container gap-0"):
        with ui.row().classes("w-full header px-4 py-3 items-center gap-2"):
            ui.icon("smart_toy").classes("text-white text-2xl")
            ui.label("Chat").classes("text-base font-semibold text-white")

        with ui.scroll_area().classes("flex-grow w-full bg-gray-50"):
            messages = ui.column().classes("w-full p-3 gap-2")

        with ui.column().classes("w-full p-3 gap-2 bg-white border-t"):
            file_input = (
                ui.upload(on_upload=handle_upload, auto_upload=True, max_files=1)
                .props("flat dense accept=*")
                # max_files=1, so any removal empties the slot
                .on("removed", lambda _: staged.discard())
                .classes("w-full")
            )
            with ui.row().classes("w-full gap-2 items-center no-wrap"):
                with ui.element("div").classes("flex-grow input-box px-3"):
                    message_input = (
                        ui.input(placeholder="Type a message...")
                        .props("borderless dense")
                        .classes("w-full")
                        .on("keydown.enter", send_message)
                    )
                ui.button(icon="send", on_click=send_message).props(
                    "round unelevated"
                ).classes("send-btn")

    client = WidgetClient(
        ColumnTranscript(messages),
        settings.widget_api_base_url,
        on_alert=lambda text: ui.notify(text, type="warning"),
        on_clear=clear_inputs,
    )
