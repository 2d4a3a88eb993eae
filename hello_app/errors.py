"""Environment-conditional presentation of unhandled errors."""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

DEVELOPMENT_ENVIRONMENT = "Development"
SERVER_ERROR_MESSAGE = "Server error"

LOGGER = structlog.get_logger(__name__)


def is_development(environment_name: str | None) -> bool:
    """Case-insensitive match of the hosting environment name."""
    if not environment_name:
        return False
    return environment_name.casefold() == DEVELOPMENT_ENVIRONMENT.casefold()


async def server_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    LOGGER.error(
        "request.unhandled_error",
        method=request.method,
        path=str(request.url.path),
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return PlainTextResponse(
        SERVER_ERROR_MESSAGE,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def install_error_handling(app: FastAPI, *, dev_mode: bool) -> None:
    """Pick the error page strategy once, before the app serves traffic.

    In development Starlette's ``ServerErrorMiddleware`` renders its debug
    traceback (HTML when the client accepts it, plain text otherwise).
    Everywhere else unhandled exceptions collapse into a fixed 500 response
    and the traceback only reaches the server log.
    """

    if dev_mode:
        app.debug = True
        return
    app.add_exception_handler(Exception, server_error_handler)
