"""
Main entrypoint for the Party API.

This module assembles the FastAPI application.  ``create_app`` takes
the settings read at process start (and optionally a ready-made store,
which the tests use to pin the clock), prepares the database, installs
the CORS middleware and error handlers, and includes the router.  Run
it through ``run.py`` or any ASGI server, e.g.::

    uvicorn party_api.app.main:create_app --factory
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router
from .core.config import Settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.visitor_store import VisitorStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[VisitorStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Application settings.  Read from the environment when omitted.
    store : Optional[VisitorStore]
        Visitor store to serve from.  Defaults to a store over
        ``settings.database_path``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    if settings is None:
        settings = Settings.from_env()
    setup_logging(settings.log_level)

    if store is None:
        store = VisitorStore(settings.database_path)
    store.init_schema()

    if not settings.api_key:
        logger.warning("API_KEY not set, /admin endpoints will reject every request")

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(router)

    return app
