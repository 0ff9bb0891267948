"""Page, script and welcome routes around the widget."""

from pathlib import Path

from fastapi import APIRouter, Depends, Response
from fastapi.responses import FileResponse

from widget_relay.config import ServerSettings, get_server_settings

PUBLIC_DIR = Path(__file__).parent.parent / "public"

router = APIRouter(tags=["pages"])

EMBED_TEMPLATE = """
    (function () {{
      let iframe = document.createElement('iframe');
      iframe.src = '{widget_url}';
      iframe.style.width = "400px";
      iframe.style.height = "400px";
      iframe.style.border = "none";
      iframe.style.position = "fixed";
      iframe.style.bottom = "20px";
      iframe.style.right = "20px";
      iframe.style.zIndex = "9999";
      document.body.appendChild(iframe);
    }})()
"""


def render_embed_script(widget_url: str) -> str:
    """Render the script that injects the widget iframe into a host page."""
    return EMBED_TEMPLATE.format(widget_url=widget_url)


@router.get("/")
async def welcome() -> dict[str, str]:
    return {"msg": "Welcome to Express server"}


@router.get("/demo", response_class=FileResponse)
async def demo_page() -> FileResponse:
    """Serve the demo host page that loads ``/embed.js``."""
    return FileResponse(PUBLIC_DIR / "demo.html", media_type="text/html")


@router.get("/embed.js")
async def embed_script(settings: ServerSettings = Depends(get_server_settings)) -> Response:
    """Serve the embed script.

    The iframe is fixed at 400x400px in the bottom-right corner and
    points at the widget page on the configured public host and port.
    """
    return Response(
        content=render_embed_script(settings.widget_url),
        media_type="application/javascript",
    )
