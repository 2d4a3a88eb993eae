"""Prometheus metrics helpers."""

from __future__ import annotations

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

REGISTRY = CollectorRegistry()

REQUESTS_TOTAL = Counter(
    "hello_requests_total",
    "Number of handled HTTP requests",
    labelnames=("method", "route", "status"),
    registry=REGISTRY,
)

REQUEST_LATENCY = Histogram(
    "hello_request_latency_seconds",
    "Latency of HTTP request handling",
    labelnames=("route",),
    buckets=(0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
    registry=REGISTRY,
)


def observe_request(*, method: str, route: str, status: int, latency_ms: float) -> None:
    REQUESTS_TOTAL.labels(method=method, route=route, status=str(status)).inc()
    REQUEST_LATENCY.labels(route=route).observe(latency_ms / 1000.0)


def render_metrics() -> tuple[bytes, str]:
    payload = generate_latest(REGISTRY)
    return payload, CONTENT_TYPE_LATEST
