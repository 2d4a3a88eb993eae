from __future__ import annotations

from fastapi.testclient import TestClient

from hello_app.main import create_app
from hello_app.settings import Settings


def get_client(**overrides) -> TestClient:
    app = create_app(Settings(**overrides))
    return TestClient(app)


def test_index_returns_hello_world() -> None:
    resp = get_client().get("/")

    assert resp.status_code == 200
    assert resp.text == "Hello world"
    assert resp.headers["content-type"].startswith("text/plain")


def test_hello_without_name_greets_stranger() -> None:
    client = get_client()

    for path in ("/hello", "/hello/"):
        resp = client.get(path, follow_redirects=False)
        assert resp.status_code == 200, path
        assert resp.text == "Hello stranger!"


def test_hello_with_name() -> None:
    resp = get_client().get("/hello/Ada")

    assert resp.status_code == 200
    assert resp.text == "Hello Ada!"


def test_hello_decodes_escaped_name() -> None:
    resp = get_client().get("/hello/Ada%20Lovelace")

    assert resp.text == "Hello Ada Lovelace!"


def test_hello_ignores_query_string() -> None:
    resp = get_client().get("/hello", params={"name": "Ada"})

    assert resp.text == "Hello stranger!"


def test_unknown_route_is_404() -> None:
    resp = get_client().get("/nope")

    assert resp.status_code == 404


def test_post_is_not_allowed() -> None:
    resp = get_client().post("/hello/Ada")

    assert resp.status_code == 405


def test_metrics_hidden_by_default() -> None:
    resp = get_client().get("/metrics")

    assert resp.status_code == 404


def test_metrics_exposed_when_enabled() -> None:
    client = get_client(metrics_enabled=True)
    client.get("/hello/Ada")
    resp = client.get("/metrics")

    assert resp.status_code == 200
    assert "hello_requests_total" in resp.text
    assert "hello_request_latency_seconds" in resp.text


def test_https_redirect_when_enabled() -> None:
    resp = get_client(https_redirect=True).get("/hello/Ada", follow_redirects=False)

    assert resp.status_code == 307
    assert resp.headers["location"].startswith("https://")
    assert resp.headers["location"].endswith("/hello/Ada")
