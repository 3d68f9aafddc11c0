"""
Main entrypoint for the NexaOps API.

This module assembles the FastAPI application: it sets up logging,
creates the database handle, registers the routes under ``/api`` and
turns malformed request bodies into the usual validation envelope.
``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app``::

    uvicorn nexaops_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api import responses
from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.logging_config import setup_logging


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module level settings
        read from the environment; tests pass their own instance to
        point the app at a temporary database.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.database = Database.from_settings(settings)

    app.include_router(api_router, prefix="/api")

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Raised by FastAPI when the body is not valid JSON.
        return responses.validation_failed(str(error.get("msg")) for error in exc.errors())

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and brings the schema up to date.
        app.state.database.init_db()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
