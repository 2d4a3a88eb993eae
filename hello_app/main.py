"""FastAPI application factory shared by the local and Lambda entrypoints."""

from __future__ import annotations

import logging
from time import perf_counter

import structlog
from fastapi import FastAPI, Request, Response, status
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware

from hello_app import metrics
from hello_app.errors import install_error_handling
from hello_app.routes import ROUTES, mount_routes
from hello_app.settings import Settings, get_settings

LOGGER = structlog.get_logger(__name__)


def configure_logging(log_level: str) -> None:
    numeric_level = logging.getLevelName(log_level.upper())
    if isinstance(numeric_level, str):
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, format="%(message)s")
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def _route_template(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path", "unmatched")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Hello",
        version=settings.app_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    install_error_handling(app, dev_mode=settings.dev_mode)

    if settings.https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            _record(request, status.HTTP_500_INTERNAL_SERVER_ERROR, start)
            raise
        _record(request, response.status_code, start)
        return response

    mount_routes(app, ROUTES)

    if settings.metrics_enabled:

        @app.get("/metrics", include_in_schema=False)
        async def metrics_endpoint() -> Response:
            payload, content_type = metrics.render_metrics()
            return Response(content=payload, media_type=content_type)

    LOGGER.info(
        "app.start",
        environment=settings.environment,
        dev_mode=settings.dev_mode,
        https_redirect=settings.https_redirect,
        metrics_enabled=settings.metrics_enabled,
    )
    return app


def _record(request: Request, status_code: int, start: float) -> None:
    latency_ms = (perf_counter() - start) * 1000
    route = _route_template(request)
    metrics.observe_request(
        method=request.method,
        route=route,
        status=status_code,
        latency_ms=latency_ms,
    )
    LOGGER.info(
        "request.end",
        method=request.method,
        path=str(request.url.path),
        route=route,
        status=status_code,
        latency_ms=round(latency_ms, 3),
    )
