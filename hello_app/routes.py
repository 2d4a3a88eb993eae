"""Route table and greeting handlers."""

from __future__ import annotations

import re
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

DEFAULT_NAME = "stranger"

Handler = Callable[[Request], Awaitable[PlainTextResponse]]

_OPTIONAL_TAIL = re.compile(r"^(?P<prefix>.*)/\{(?P<param>[A-Za-z_][A-Za-z0-9_]*)\?\}$")


@dataclass(frozen=True, slots=True)
class Route:
    """A (method, path pattern) pair bound to a handler."""

    method: str
    path: str
    handler: Handler
    name: str | None = None


async def index(request: Request) -> PlainTextResponse:
    del request
    return PlainTextResponse("Hello world")


async def hello(request: Request) -> PlainTextResponse:
    name = request.path_params.get("name") or DEFAULT_NAME
    return PlainTextResponse(f"Hello {name}!")


ROUTES: tuple[Route, ...] = (
    Route("GET", "/", index, name="index"),
    Route("GET", "/hello/{name?}", hello, name="hello"),
)


def expand_path(pattern: str) -> list[str]:
    """Expand an optional trailing ``{param?}`` segment into concrete paths.

    ``/hello/{name?}`` becomes ``/hello/{name}``, ``/hello/`` and ``/hello``.
    Patterns without an optional segment come back unchanged.
    """

    match = _OPTIONAL_TAIL.match(pattern)
    if match is None:
        return [pattern]
    prefix = match.group("prefix")
    paths = [f"{prefix}/{{{match.group('param')}}}", f"{prefix}/"]
    if prefix:
        paths.append(prefix)
    return paths


def mount_routes(app: FastAPI, routes: Iterable[Route] = ROUTES) -> None:
    for route in routes:
        for path in expand_path(route.path):
            app.add_api_route(
                path,
                route.handler,
                methods=[route.method],
                response_class=PlainTextResponse,
                name=route.name,
                include_in_schema=False,
            )
