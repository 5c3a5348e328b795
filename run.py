"""Entry point for running the Church Portal API.

Starts the ASGI application with uvicorn.  Host and port come from the
``HOST`` and ``PORT`` environment variables (or a ``.env`` file),
defaulting to ``0.0.0.0:5000``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from church_portal_api.app.core.config import Settings
from church_portal_api.app.main import create_app


async def main() -> None:
    settings = Settings()
    config = Config(
        app=create_app(settings),
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
