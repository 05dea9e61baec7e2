"""
Main entrypoint for the Entity API.

This module assembles the FastAPI application: it sets up logging,
creates the in‑memory store, installs the CORS and request logger
middleware, registers the error handlers and includes the API router.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn entity_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router as api_router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.middleware import RequestLoggerMiddleware
from .core.store import AppStore, build_store


def create_app(store: Optional[AppStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[AppStore]
        Store backing the application.  When omitted a new one is
        built, seeded with sample data unless ``SEED_DATA`` is false.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None, settings.access_log)

    if store is None:
        store = build_store(seed=settings.seed_data)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        docs_url=settings.docs_url,
    )
    app.state.store = store

    # Middleware added last runs first: CORS answers preflight requests
    # before they reach the request logger.
    app.add_middleware(RequestLoggerMiddleware, logs=store.requests)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_credentials=True,
        allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()
