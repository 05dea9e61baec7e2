"""Entry point for the Entity API server.

This script serves the FastAPI application with Uvicorn.  Host and port
are read from the ``HOST`` and ``PORT`` environment variables (see
``entity_api/app/core/config.py``); defaults are ``0.0.0.0`` and
``3001``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from entity_api.app.core.config import settings
from entity_api.app.main import app


async def main() -> None:
    """Start the API server and block until it stops."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    logging.getLogger(__name__).info("Servidor escuchando en http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
