"""Relay endpoint for widget chat requests.

Accepts a multipart message and optional file, forwards them upstream,
and returns the reply text.
"""

import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile as StarletteUploadFile

from widget_relay.models.schemas import ChatReply, ChatRequest, ErrorReply, UploadedFile
from widget_relay.relay.service import RelayService, get_relay_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["relay"])

DEFAULT_MIME_TYPE = "application/octet-stream"


async def _read_upload(file: StarletteUploadFile | None) -> UploadedFile | None:
    """Read an uploaded file into memory.

    Args:
        file: The uploaded file, if any.

    Returns:
        UploadedFile with the original name, content type and bytes.
    """
    if file is None:
        return None

    content = await file.read()
    return UploadedFile(
        name=file.filename or "",
        mime_type=file.content_type or DEFAULT_MIME_TYPE,
        content=content,
    )


@router.post(
    "/openai-responses",
    response_model=ChatReply,
    responses={500: {"model": ErrorReply}},
)
async def relay_chat(
    message: str | None = Form(None),
    file: UploadFile | str | None = File(None),
    service: RelayService = Depends(get_relay_service),
) -> ChatReply | JSONResponse:
    """Relay a widget message, and an optional file, to the upstream model.

    Args:
        message: Prompt text (multipart field). Defaults to a generic
                 prompt when absent or empty.
        file: Optional single uploaded file (multipart field). A plain
              text field under this name is ignored.

    Returns:
        ChatReply with the upstream output text.

    Raises:
        500: Any failure while reading the file or calling upstream.
    """
    try:
        uploaded = await _read_upload(file if isinstance(file, StarletteUploadFile) else None)
        chat_request = ChatRequest.from_form(message, uploaded)
        reply = await service.respond(chat_request)
    except Exception:
        logger.exception("Error communicating with OpenAI")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorReply().model_dump(),
        )

    return ChatReply(reply=reply)
