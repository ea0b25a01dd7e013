"""TokenAuthMiddlewareのユニットテスト。"""

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from prcheck.middleware import TokenAuthMiddleware


async def _ok(request: Request) -> JSONResponse:
    return JSONResponse({"ok": True})


def _app(url_token: str) -> Starlette:
    return Starlette(
        routes=[Route("/mcp", _ok), Route("/health", _ok)],
        middleware=[Middleware(TokenAuthMiddleware, url_token=url_token)],
    )


class TestTokenAuthMiddleware:
    def test_no_token_configured(self) -> None:
        client = TestClient(_app(""))
        assert client.get("/mcp").status_code == 200

    def test_rejects_missing_token(self) -> None:
        client = TestClient(_app("secret"))
        response = client.get("/mcp")
        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized"

    def test_accepts_query_token(self) -> None:
        client = TestClient(_app("secret"))
        assert client.get("/mcp", params={"token": "secret"}).status_code == 200

    def test_accepts_bearer_token(self) -> None:
        client = TestClient(_app("secret"))
        assert client.get("/mcp", headers={"Authorization": "Bearer secret"}).status_code == 200

    def test_health_skips_auth(self) -> None:
        client = TestClient(_app("secret"))
        assert client.get("/health").status_code == 200
