"""Configuration with environment variable loading.

Pydantic-based settings built once at startup and handed to the handlers.
Never mutated at runtime.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_PORT = 3000
UPSTREAM_MODEL = "gpt-4.1"


def _port_from_env() -> int:
    raw = os.getenv("PORT", "").strip()
    return int(raw) if raw.isdigit() and int(raw) > 0 else DEFAULT_PORT


class ServerSettings(BaseModel):
    """Server settings that do not involve the upstream credential.

    Attributes:
        host: Interface the server binds to.
        port: Port the server listens on (PORT, default 3000).
        public_host: Host name written into the embed script's iframe URL.
        api_base_url: Base URL the widget posts chat requests to
                      (None derives it from the port).
        log_level: Root logging level.
    """

    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(default_factory=_port_from_env, ge=1, le=65535)
    public_host: str = Field(
        default_factory=lambda: os.getenv("PUBLIC_HOST", "localhost"),
        description="Host name the embed script points the iframe at",
    )
    api_base_url: str | None = Field(
        default_factory=lambda: os.getenv("API_BASE_URL") or None,
        description="Relay base URL used by the widget",
    )
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    @property
    def widget_url(self) -> str:
        """Absolute URL of the widget page, as embedded by ``/embed.js``."""
        return f"http://{self.public_host}:{self.port}/widget"

    @property
    def widget_api_base_url(self) -> str:
        return self.api_base_url or f"http://localhost:{self.port}"


class RelayConfig(ServerSettings):
    """Configuration for the upstream relay.

    Attributes:
        openai_api_key: API key for the OpenAI Responses API.
        model_name: Upstream model identifier.
    """

    openai_api_key: str = Field(
        default_factory=lambda: os.getenv("OPENAI_API_KEY", ""),
        validate_default=True,
        description="API key for OpenAI",
    )
    model_name: str = Field(default=UPSTREAM_MODEL, description="Upstream model")

    @field_validator("openai_api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("OPENAI_API_KEY is required. Set it in the environment or .env")
        return v.strip()


def get_relay_config() -> RelayConfig:
    """Create relay configuration from environment.

    Returns:
        Configured RelayConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return RelayConfig()


@lru_cache
def get_server_settings() -> ServerSettings:
    """Return the process-wide server settings."""
    return ServerSettings()
