import base64
from typing import Annotated, Literal

from pydantic import BaseModel, Field

FALLBACK_PROMPT = "What's inside this file?"
GENERIC_ERROR = "Something went wrong"


class UploadedFile(BaseModel):
    """A file attached to a chat request, held in memory for one request.

    Attributes:
        name: Original filename.
        mime_type: Declared content type.
        content: Raw file bytes.
    """

    name: str
    mime_type: str
    content: bytes


class ChatRequest(BaseModel):
    """Message and optional file received by the relay endpoint.

    Attributes:
        message: Prompt text, already defaulted to the fallback prompt.
        file: Optional attached file.
    """

    message: str = FALLBACK_PROMPT
    file: UploadedFile | None = None

    @classmethod
    def from_form(cls, message: str | None, file: UploadedFile | None = None) -> "ChatRequest":
        """Build a request from raw form fields, defaulting an absent or empty message."""
        return cls(message=message or FALLBACK_PROMPT, file=file)


class TextBlock(BaseModel):
    """Upstream text input."""

    type: Literal["input_text"] = "input_text"
    text: str


class FileData(BaseModel):
    name: str
    mime_type: str
    data: str = Field(..., description="Standard base64 encoding of the file bytes")


class FileBlock(BaseModel):
    """Upstream file input carrying base64 data."""

    type: Literal["input_file"] = "input_file"
    file_data: FileData

    @classmethod
    def from_upload(cls, file: UploadedFile) -> "FileBlock":
        encoded = base64.b64encode(file.content).decode("ascii")
        return cls(file_data=FileData(name=file.name, mime_type=file.mime_type, data=encoded))


ContentBlock = Annotated[TextBlock | FileBlock, Field(discriminator="type")]


def build_content(request: ChatRequest) -> list[ContentBlock]:
    """Shape a chat request into upstream content blocks.

    Args:
        request: The incoming chat request.

    Returns:
        A single text block, or a text block followed by a file block
        when the request carries a file.
    """
    blocks: list[ContentBlock] = [TextBlock(text=request.message)]
    if request.file is not None:
        blocks.append(FileBlock.from_upload(request.file))
    return blocks


class ChatReply(BaseModel):
    """Successful relay response.

    Attributes:
        reply: Upstream output text.
    """

    reply: str


class ErrorReply(BaseModel):
    """Failed relay response. Never carries upstream detail."""

    error: str = GENERIC_ERROR
