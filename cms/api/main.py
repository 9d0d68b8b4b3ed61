"""FastAPI application serving the CMS modules."""

import logging
from typing import Optional

from fastapi import FastAPI, Request

from cms import __version__
from cms.config import get
from cms.core.application import Application, create_application
from cms.db import close_db
from cms.http import BaseApiController

logger = logging.getLogger(__name__)

API_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def create_app(application: Optional[Application] = None) -> FastAPI:
    """
    Create the HTTP application.

    Args:
        application: Booted CMS application; created from config when omitted
    """
    if application is None:
        application = create_application()

    app = FastAPI(
        title=get("app.name", "CMS"),
        description="CMS module core",
        version=__version__,
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc
    )
    app.state.cms = application
    app.add_event_handler("shutdown", application.modules.shutdown_all)
    app.add_event_handler("shutdown", close_db)

    for module in application.modules.get_enabled():
        for router in module.get_routers():
            app.include_router(router)
            logger.debug(f"Included routes from module {module.name}")

    @app.api_route("/api/{path:path}", methods=API_METHODS, tags=["api"], include_in_schema=False)
    async def missing_method(path: str):
        """Fallback for API paths no module handles."""
        return BaseApiController(application).missing_method(path)

    for name in get("http.middleware", []) or []:
        middleware = application.router.get(name)
        if middleware is None:
            raise RuntimeError(f"Unknown middleware alias: {name}")
        app.add_middleware(middleware)
        logger.info(f"Installed middleware: {name}")

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler."""
        logger.error(f"Unhandled exception on {request.url.path}: {exc}")
        return BaseApiController(application).send_error("Internal server error")

    return app
