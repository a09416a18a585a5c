"""
Main entrypoint for the Blog List API.

This module assembles the FastAPI application, sets up logging,
manages the MongoDB client and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn blog_list_api.app.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from pymongo import MongoClient

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.db import create_client
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging


def create_app(
    mongo_client: Optional[MongoClient] = None,
    config: Settings = settings,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    mongo_client : Optional[MongoClient]
        Client to use instead of connecting to ``config.mongodb_uri``.
        An injected client is left open on shutdown; its owner closes it.
    config : Settings
        Settings to build the application from.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging comes first so that everything below may log.
    setup_logging(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owns_client = app.state.mongo_client is None
        if owns_client:
            app.state.mongo_client = create_client(config)
        try:
            yield
        finally:
            if owns_client:
                app.state.mongo_client.close()
                app.state.mongo_client = None

    app = FastAPI(
        title=config.project_name,
        version=config.api_version,
        debug=config.debug,
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.mongo_client = mongo_client

    app.include_router(api_router, prefix="/api")
    register_error_handlers(app)

    return app


# Created at import time so that uvicorn can discover it.  No
# connection is made until the application starts.
app = create_app()
