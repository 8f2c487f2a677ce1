"""
Main entrypoint for the Crop Price Dashboard API.

This module assembles the FastAPI application: it sets up logging,
creates the listings store, includes the API router and mounts the
static frontend.  ``create_app`` is the composition root and owns the
store for the lifetime of the application; it is instantiated at
module import time as ``app`` so that it can be served directly::

    uvicorn crop_dashboard_api.app.main:app

The store is opened on startup and closed on shutdown.  Uvicorn turns
SIGINT/SIGTERM into a graceful shutdown, so an interrupt closes the
store before the process exits.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.db import ListingStore, StoreUnavailableError, get_database_path
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ListingStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment-driven
        module-level settings.
    store : Optional[ListingStore]
        Store to serve from.  When omitted, one is built for
        ``settings.database_url``.

    Returns
    -------
    FastAPI
        A configured application whose ``state.store`` is the store
        handed to every route handler.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    if store is None:
        store = ListingStore(get_database_path(settings.database_url))

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = store

    app.include_router(router)
    # Mounted last so the API routes above take precedence.
    app.mount("/", StaticFiles(directory=settings.static_dir), name="static")

    @app.on_event("startup")
    def open_store() -> None:
        try:
            store.open()
        except StoreUnavailableError:
            if settings.database_required:
                raise
            logger.warning("Continuing without a database; queries will fail")

    @app.on_event("shutdown")
    def close_store() -> None:
        store.close()

    return app


app = create_app()
