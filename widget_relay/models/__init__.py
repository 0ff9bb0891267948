"""Pydantic models for the relay endpoint and the upstream request.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - UploadedFile: File attached to a chat request
    - ChatRequest: Message plus optional file received by the relay
    - TextBlock / FileBlock: Upstream content blocks, tagged by ``type``
    - ChatReply: Successful relay response
    - ErrorReply: Generic relay failure
"""

from widget_relay.models.schemas import (
    FALLBACK_PROMPT,
    GENERIC_ERROR,
    ChatReply,
    ChatRequest,
    ContentBlock,
    ErrorReply,
    FileBlock,
    FileData,
    TextBlock,
    UploadedFile,
    build_content,
)

__all__ = [
    "FALLBACK_PROMPT",
    "GENERIC_ERROR",
    "ChatReply",
    "ChatRequest",
    "ContentBlock",
    "ErrorReply",
    "FileBlock",
    "FileData",
    "TextBlock",
    "UploadedFile",
    "build_content",
]
