"""Entry point for the Party API server.

Reads the configuration from the environment once, builds the
application and serves it with Uvicorn on ``LISTEN_ADDR``.  Uvicorn
takes care of graceful shutdown on SIGINT/SIGTERM.

Usage:
    API_KEY=secret SQLITE_DB=party.db python run.py
"""
import asyncio

from uvicorn import Config, Server

from party_api.app.core.config import Settings
from party_api.app.main import create_app


async def main() -> None:
    """Build the app from the environment and serve it until stopped."""
    settings = Settings.from_env()
    app = create_app(settings)
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
        proxy_headers=False,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
