"""AWS Lambda transport.

Mangum translates API Gateway (REST and HTTP API payload 1.0/2.0) and
Application Load Balancer events into ASGI calls, so the same FastAPI app
answers Lambda invocations and local requests alike.
"""

from __future__ import annotations

from typing import Any, Callable, Dict

from fastapi import FastAPI
from mangum import Mangum

from hello_app.main import create_app
from hello_app.settings import get_settings

LambdaHandler = Callable[[Dict[str, Any], Any], Dict[str, Any]]


def build_handler(app: FastAPI, *, base_path: str = "/") -> LambdaHandler:
    adapter = Mangum(app, lifespan="off", api_gateway_base_path=base_path)

    def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
        return adapter(event, context)

    return handler


app = create_app()
handler = build_handler(app, base_path=get_settings().api_gateway_base_path)
