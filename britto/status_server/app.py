"""FastAPI app for GET / (welcome page) and GET /status (cache round-trip as plain text)."""

import html
import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse, PlainTextResponse

from britto.errors import CacheUnavailable
from britto.status_server.probe import CacheClient, probe

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Your new application is ready."

_UI_HTML: Optional[str] = None


def _load_ui_html() -> str:
    global _UI_HTML
    if _UI_HTML is not None:
        return _UI_HTML
    p = Path(__file__).resolve().parent / "templates" / "index.html"
    if p.exists():
        template = p.read_text(encoding="utf-8")
    else:
        template = "<!DOCTYPE html><html><body><h1>{{ message }}</h1></body></html>"
    _UI_HTML = template.replace("{{ message }}", html.escape(WELCOME_MESSAGE))
    return _UI_HTML


def create_app(cache: CacheClient) -> FastAPI:
    """Build FastAPI app around a cache client. The client must be safe to share across requests."""
    app = FastAPI(title="britto", description="Welcome page and cache status")

    @app.get("/", response_class=HTMLResponse)
    def get_index() -> str:
        """Static welcome page."""
        return _load_ui_html()

    @app.get("/status", response_class=PlainTextResponse)
    def get_status() -> PlainTextResponse:
        """Write and read back the status message; 503 when the cache is unavailable."""
        try:
            return PlainTextResponse(probe(cache))
        except CacheUnavailable as e:
            logger.warning("status probe failed: %s", e)
            return PlainTextResponse(f"cache unavailable: {e}\n", status_code=503)

    return app


def run_server(config: dict) -> None:
    """Start the status server on status_server.host:port with a redis cache from the cache section."""
    import uvicorn

    from britto.config.settings import get_cache_config, get_status_server_config
    from britto.status_server.cache import RedisCacheClient

    server_cfg = get_status_server_config(config)
    cache = RedisCacheClient.from_config(get_cache_config(config))
    app = create_app(cache)
    logger.info("Status server on %s:%s", server_cfg["host"], server_cfg["port"])
    uvicorn.run(app, host=server_cfg["host"], port=server_cfg["port"], log_level="info")


def main() -> None:
    """Console script entrypoint: read config and serve."""
    import sys

    from britto.config.settings import read_config
    from britto.core.logging_utils import configure_logging

    configure_logging(verbose=True)
    config_path = sys.argv[1] if len(sys.argv) > 1 else None
    config, resolved = read_config(config_path)
    logger.info("config %s", resolved)
    run_server(config)
