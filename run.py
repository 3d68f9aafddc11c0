"""Entry point for serving the NexaOps API.

Starts the FastAPI application with uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3000``); all other configuration is described in
``nexaops_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from nexaops_api.app.core.config import settings
from nexaops_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    # log_config=None keeps the handlers installed by ``setup_logging``.
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_config=None)
    server = Server(config)
    logging.getLogger(__name__).info("NexaOps server running on http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
