import pytest
from starlette.applications import Starlette
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.testclient import TestClient

from middleware import CORSHeadersMiddleware
from tests.helpers import assert_cors_headers


async def root(request):
    return PlainTextResponse("API Running")


async def broken(request):
    return JSONResponse({"error": "bad"}, status_code=400)


@pytest.fixture
def client():
    app = Starlette()
    app.add_middleware(CORSHeadersMiddleware)
    app.add_route("/", root)
    app.add_route("/broken", broken)
    return TestClient(app)


@pytest.mark.parametrize("path", ["/", "/chat", "/anything"])
def test_preflight_returns_empty_body_with_cors_headers(client, path):
    """Given an OPTIONS probe, the middleware should answer immediately with no body."""
    response = client.options(path)
    assert response.status_code == 200
    assert response.content == b""
    assert_cors_headers(response)


def test_preflight_with_browser_headers(client):
    response = client.options(
        "/",
        headers={"Origin": "https://buddy.example", "Access-Control-Request-Method": "POST"},
    )
    assert response.status_code == 200
    assert response.content == b""
    assert_cors_headers(response)


def test_headers_attached_without_origin(client):
    """Headers should be present even when the request carries no Origin."""
    response = client.get("/")
    assert response.text == "API Running"
    assert_cors_headers(response)


def test_headers_attached_to_error_responses(client):
    response = client.get("/broken")
    assert response.status_code == 400
    assert_cors_headers(response)
