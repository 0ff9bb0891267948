"""Main application entry point.

Runs FastAPI with the NiceGUI widget mounted on the same server
(port 3000 unless PORT is set).
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI handles the relay, pages and static files; NiceGUI serves
    the widget at /widget.
    """
    import uvicorn
    from nicegui import ui

    from widget_relay.api.app import create_app
    from widget_relay.config import get_server_settings
    from widget_relay.ui.widget_page import widget_page  # noqa: F401 - Registers the page

    settings = get_server_settings()
    app = create_app()

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title="Chat Widget",
        favicon="💬",
    )

    logger.info(f"Server is listening on port {settings.port}")
    logger.info(f"Widget available at http://localhost:{settings.port}/widget")
    logger.info(f"Embed script at http://localhost:{settings.port}/embed.js")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
