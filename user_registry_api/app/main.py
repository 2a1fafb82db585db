"""
Main entrypoint for the User Registry API.

This module assembles the FastAPI application, sets up logging,
creates the user store and includes the routers.  ``create_app``
builds and configures the app, which is then instantiated at module
import time as ``app``, e.g.::

    uvicorn user_registry_api.app.main:app --reload

Any request that matches no route, including a known path with an
unsupported method, is answered with ``404 Endpoint not found``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.user_service import UserStore

logger = logging.getLogger(__name__)

ENDPOINT_NOT_FOUND = "Endpoint not found"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Catch-all for requests the router could not dispatch."""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        logger.debug("No endpoint for %s %s", request.method, request.url.path)
        return PlainTextResponse(ENDPOINT_NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call creates a new, empty :class:`UserStore` attached to
    ``app.state``, so separate applications never share records.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    docs = {} if settings.enable_docs else {"docs_url": None, "redoc_url": None, "openapi_url": None}
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        **docs,
    )
    app.state.user_store = UserStore()

    app.include_router(router)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    logger.info("%s %s ready", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
