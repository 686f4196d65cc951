"""
Main entrypoint for the Employee Directory API.

This module assembles the FastAPI application, sets up logging, owns
the lifecycle of the employee store and includes the versioned
routers.  ``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn employee_api.app.main:app --reload

The store is constructed together with the app, seeded once on
startup and then shared by all requests through ``app.state.store``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.employee_store import EmployeeStore


logger = logging.getLogger(__name__)


def _validation_message(errors: list) -> str:
    missing = [str(err["loc"][-1]) for err in errors if err.get("type") == "missing"]
    if missing:
        return "Missing required fields: " + ", ".join(missing)
    return "Invalid request parameters"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed bodies and query strings with 400.

    FastAPI's default is 422; clients of this API expect a plain
    client error with an ``error`` message.
    """
    errors = exc.errors()
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": _validation_message(errors), "detail": jsonable_encoder(errors)},
    )


def create_app(settings: Optional[Settings] = None, store: Optional[EmployeeStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the environment-derived
        ``settings`` instance.
    store : Optional[EmployeeStore]
        Pre-built store, mainly for tests.  A store that is already
        seeded is served as is.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the store and
    # routers can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.state.settings = settings
    app.state.store = store if store is not None else EmployeeStore(
        allow_hire_date_update=settings.allow_hire_date_update,
        faker_locale=settings.faker_locale,
        faker_seed=settings.faker_seed,
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        employee_store: EmployeeStore = app.state.store
        if not employee_store.seeded:
            employee_store.seed(settings.seed_count)
        logger.info("Serving %d employees", employee_store.count())

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
