"""Opaque — hash-fragment URL routing for single-page apps.

Internal application paths never reach the address bar. The encoder
turns ``/article/42`` into ``/v2/#article/42``; the decoder turns any
public URL (current hash form, legacy ``?code=<token>/<path>`` form, or
nothing at all) back into an internal path; the dispatcher maps that path
to a page.

Basic usage::

    from opaque import decode, dispatch, encode

    url = encode("/article/42")       # PublicURL(/v2/#article/42)
    path = decode(url)                # "/article/42"
    match = dispatch(path)            # page="article", params={"id": "42"}

Navigation over an injected history::

    from opaque import MemoryHistory, Navigator

    nav = Navigator(MemoryHistory("/categories"))
    nav.canonicalize()
    nav.resolve().page                # "categories"
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "Dispatcher",
    "EncodingScheme",
    "HashFragment",
    "LegacyCode",
    "MemoryHistory",
    "Navigator",
    "OpaqueError",
    "OpaqueRedirectMiddleware",
    "PublicURL",
    "QueryParams",
    "Route",
    "RouteMatch",
    "RoutingConfig",
    "Unencoded",
    "decode",
    "dispatch",
    "encode",
    "encode_link",
    "normalize_path",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import opaque`` fast while providing a clean top-level API.
    """
    if name in (
        "EncodingScheme",
        "HashFragment",
        "LegacyCode",
        "Unencoded",
        "decode",
        "encode",
        "encode_link",
        "normalize_path",
    ):
        from opaque import codec as _codec

        return getattr(_codec, name)

    if name in ("Dispatcher", "Route", "RouteMatch"):
        from opaque import routing as _routing

        return getattr(_routing, name)

    if name == "dispatch":
        from opaque.pages import dispatch

        return dispatch

    if name in ("MemoryHistory", "Navigator"):
        from opaque import navigation as _nav

        return getattr(_nav, name)

    if name == "RoutingConfig":
        from opaque.config import RoutingConfig

        return RoutingConfig

    if name in ("ConfigurationError", "OpaqueError"):
        from opaque import errors as _errors

        return getattr(_errors, name)

    if name == "PublicURL":
        from opaque.http.url import PublicURL

        return PublicURL

    if name == "QueryParams":
        from opaque.http.query import QueryParams

        return QueryParams

    if name == "OpaqueRedirectMiddleware":
        from opaque.middleware import OpaqueRedirectMiddleware

        return OpaqueRedirectMiddleware

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
