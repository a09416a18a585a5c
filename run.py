"""Entry point for serving the Blog List API.

Starts the FastAPI application with Uvicorn.  Host, port and log level
come from the same environment variables as the application settings
(``HOST``, ``PORT``, ``LOG_LEVEL``); MongoDB is configured through
``MONGODB_URI`` and ``MONGODB_DB``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from blog_list_api.app.core.config import settings


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app="blog_list_api.app.main:app",
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
