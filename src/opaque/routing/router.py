"""Dispatcher — ordered rule table with first-match-wins semantics.

The table is validated once at construction. Dispatch itself never
raises: a path no rule matches yields the ``not-found`` route.
"""

import logging
from collections.abc import Iterable

from opaque.codec.paths import normalize_path
from opaque.errors import ConfigurationError
from opaque.routing.params import extract_param, strip_path
from opaque.routing.route import NOT_FOUND, Route, RouteMatch

logger = logging.getLogger("opaque.routing")


def _validate(routes: list[Route]) -> None:
    """Reject malformed or duplicate rules."""
    seen_exact: set[str] = set()
    for route in routes:
        if route.kind not in ("exact", "prefix"):
            msg = f"Route {route.page!r} has kind {route.kind!r}; expected 'exact' or 'prefix'"
            raise ConfigurationError(msg)
        if not route.pattern.startswith("/"):
            msg = f"Route pattern {route.pattern!r} for page {route.page!r} must start with '/'"
            raise ConfigurationError(msg)
        if route.kind == "prefix":
            if not route.param:
                msg = f"Prefix route {route.pattern!r} needs a parameter name"
                raise ConfigurationError(msg)
            continue
        pattern = strip_path(route.pattern)
        if pattern in seen_exact:
            msg = f"Duplicate exact route {pattern!r} (page {route.page!r})"
            raise ConfigurationError(msg)
        seen_exact.add(pattern)


class Dispatcher:
    """Ordered route table.

    Usage::

        dispatcher = Dispatcher([
            exact("/", "home"),
            prefix("/postguild/", "post-guild"),
            prefix("/guild/", "guild"),
        ])
        match = dispatcher.dispatch("/guild/7")
        match.page    # "guild"
        match.params  # {"id": "7"}

    Rules are tried in the order given. Register specific patterns
    before generic ones that could also match them.
    """

    __slots__ = ("_fallback", "_routes")

    def __init__(self, routes: Iterable[Route], *, fallback: Route = NOT_FOUND) -> None:
        table = list(routes)
        _validate(table)
        self._routes: tuple[Route, ...] = tuple(table)
        self._fallback = fallback

    @property
    def routes(self) -> tuple[Route, ...]:
        """The registered rules, in match order."""
        return self._routes

    @property
    def fallback(self) -> Route:
        return self._fallback

    def dispatch(self, internal_path: str) -> RouteMatch:
        """Select the route for *internal_path*. Never raises."""
        path = normalize_path(internal_path)
        stripped = strip_path(path)
        for route in self._routes:
            if route.kind == "exact":
                if stripped == strip_path(route.pattern):
                    logger.debug("dispatch %r -> %s (exact)", path, route.page)
                    return RouteMatch(route=route, params={})
            elif path.startswith(route.pattern):
                value = extract_param(path, route.pattern)
                logger.debug("dispatch %r -> %s (%s=%r)", path, route.page, route.param, value)
                return RouteMatch(route=route, params={route.param: value})  # type: ignore[dict-item]

        logger.debug("dispatch %r -> %s (no rule matched)", path, self._fallback.page)
        return RouteMatch(route=self._fallback, params={})
