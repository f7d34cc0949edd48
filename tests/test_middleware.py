"""Tests for opaque.middleware — direct-load redirect ASGI middleware."""

from typing import Any

import pytest

from opaque.codec import decode
from opaque.config import RoutingConfig
from opaque.middleware import OpaqueRedirectMiddleware
from opaque.pages import dispatch


async def _app(scope: Any, receive: Any, send: Any) -> None:
    await send({"type": "http.response.start", "status": 200, "headers": []})
    await send({"type": "http.response.body", "body": b"app"})


async def _receive() -> dict[str, Any]:
    return {"type": "http.request", "body": b"", "more_body": False}


async def _call(
    middleware: OpaqueRedirectMiddleware,
    path: str,
    method: str = "GET",
    scope_type: str = "http",
    raw_path: bytes | None = None,
) -> list[dict[str, Any]]:
    sent: list[dict[str, Any]] = []

    async def send(message: dict[str, Any]) -> None:
        sent.append(message)

    scope = {"type": scope_type, "method": method, "path": path, "query_string": b""}
    if raw_path is not None:
        scope["raw_path"] = raw_path
    await middleware(scope, _receive, send)
    return sent


def _headers(message: dict[str, Any]) -> dict[bytes, bytes]:
    return dict(message["headers"])


class TestRedirect:
    async def test_bare_path_redirects(self) -> None:
        sent = await _call(OpaqueRedirectMiddleware(_app), "/categories")
        assert sent[0]["status"] == 302
        assert _headers(sent[0])[b"location"] == b"/v2/#categories"
        assert sent[1]["body"] == b""

    async def test_root_redirects(self) -> None:
        sent = await _call(OpaqueRedirectMiddleware(_app), "/")
        assert _headers(sent[0])[b"location"] == b"/v2/#"

    async def test_param_path(self) -> None:
        sent = await _call(OpaqueRedirectMiddleware(_app), "/article/42")
        assert _headers(sent[0])[b"location"] == b"/v2/#article/42"

    async def test_non_ascii_path_is_quoted(self) -> None:
        sent = await _call(OpaqueRedirectMiddleware(_app), "/category/café")
        assert _headers(sent[0])[b"location"] == b"/v2/#category/caf%C3%A9"

    async def test_literal_percent_escape_in_param_survives(self) -> None:
        sent = await _call(
            OpaqueRedirectMiddleware(_app), "/user/a%41", raw_path=b"/user/a%2541"
        )
        location = _headers(sent[0])[b"location"]
        assert location == b"/v2/#user/a%2541"
        assert dispatch(decode(location.decode())).params == {"user_id": "a%41"}

    async def test_literal_percent_without_raw_path(self) -> None:
        sent = await _call(OpaqueRedirectMiddleware(_app), "/user/a%41")
        location = _headers(sent[0])[b"location"]
        assert location == b"/v2/#user/a%2541"
        assert dispatch(decode(location.decode())).params == {"user_id": "a%41"}

    async def test_raw_path_with_utf8_bytes(self) -> None:
        sent = await _call(
            OpaqueRedirectMiddleware(_app),
            "/category/caf\u00e9",
            raw_path="/category/caf\u00e9".encode(),
        )
        assert _headers(sent[0])[b"location"] == b"/v2/#category/caf%C3%A9"

    async def test_head_redirects(self) -> None:
        sent = await _call(OpaqueRedirectMiddleware(_app), "/market", method="HEAD")
        assert sent[0]["status"] == 302

    async def test_not_cached(self) -> None:
        sent = await _call(OpaqueRedirectMiddleware(_app), "/market")
        assert _headers(sent[0])[b"cache-control"] == b"no-store"

    async def test_custom_status_and_root(self) -> None:
        mw = OpaqueRedirectMiddleware(_app, RoutingConfig(opaque_root="/s/"), status=307)
        sent = await _call(mw, "/market")
        assert sent[0]["status"] == 307
        assert _headers(sent[0])[b"location"] == b"/s/#market"


class TestPassThrough:
    @pytest.mark.parametrize("path", ["/v2/", "/v2", "/api/auth/user", "/static/a.css"])
    async def test_forwarded(self, path: str) -> None:
        sent = await _call(OpaqueRedirectMiddleware(_app), path)
        assert sent[0]["status"] == 200
        assert sent[1]["body"] == b"app"

    async def test_post_forwarded(self) -> None:
        sent = await _call(OpaqueRedirectMiddleware(_app), "/categories", method="POST")
        assert sent[0]["status"] == 200

    async def test_non_http_scope_forwarded(self) -> None:
        seen: list[str] = []

        async def app(scope: Any, receive: Any, send: Any) -> None:
            seen.append(scope["type"])

        await OpaqueRedirectMiddleware(app)({"type": "lifespan"}, _receive, _noop_send)
        assert seen == ["lifespan"]


async def _noop_send(message: Any) -> None:
    return None


class TestShouldRedirect:
    def test_decision(self) -> None:
        mw = OpaqueRedirectMiddleware(_app)
        assert mw.should_redirect("GET", "/trending")
        assert not mw.should_redirect("DELETE", "/trending")
        assert not mw.should_redirect("GET", "/v2/")
        assert not mw.should_redirect("GET", "/uploads/x.png")
