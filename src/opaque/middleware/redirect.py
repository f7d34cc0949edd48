"""Direct-load redirect middleware.

A browser that loads ``/categories`` directly (bookmark, typed URL,
external link) must not keep that path in its address bar. The server
answers with a redirect to the opaque form, ``/v2/#categories``, and the
client-side decoder takes it from there.

Only ``GET`` and ``HEAD`` are redirected. API calls, static assets, and
anything already under the opaque root pass straight through.
"""

import logging
from urllib.parse import quote

from opaque._internal.asgi import ASGIApp, Receive, Scope, Send
from opaque.codec import encode_link
from opaque.config import DEFAULT_CONFIG, RoutingConfig

logger = logging.getLogger("opaque.middleware")

_REDIRECT_METHODS = frozenset({"GET", "HEAD"})


def _encoded_path(scope: Scope) -> str:
    """The request path, still percent-encoded.

    ``raw_path`` is used as sent so a literal ``%xx`` in a segment survives
    the dispatcher's single decode. Servers that omit it get ``path``
    re-quoted, with ``%`` escaped.
    """
    raw_path = scope.get("raw_path")
    if raw_path:
        return quote(raw_path, safe="/%")
    return quote(scope["path"], safe="/")


class OpaqueRedirectMiddleware:
    """ASGI middleware redirecting bare internal paths to opaque URLs.

    Usage::

        app = OpaqueRedirectMiddleware(app)

    Or with custom config::

        app = OpaqueRedirectMiddleware(app, RoutingConfig(opaque_root="/s/"))
    """

    __slots__ = ("app", "config", "status")

    def __init__(
        self,
        app: ASGIApp,
        config: RoutingConfig = DEFAULT_CONFIG,
        *,
        status: int = 302,
    ) -> None:
        self.app = app
        self.config = config
        self.status = status

    def should_redirect(self, method: str, path: str) -> bool:
        return (
            method in _REDIRECT_METHODS
            and not self.config.is_opaque(path)
            and not self.config.is_passthrough(path)
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or not self.should_redirect(scope["method"], scope["path"]):
            await self.app(scope, receive, send)
            return

        location = encode_link(_encoded_path(scope), self.config)
        logger.debug("redirect %s %s -> %s", scope["method"], scope["path"], location)
        await send(
            {
                "type": "http.response.start",
                "status": self.status,
                "headers": [
                    (b"location", location.encode("ascii")),
                    (b"content-length", b"0"),
                    (b"cache-control", b"no-store"),
                ],
            }
        )
        await send({"type": "http.response.body", "body": b""})
