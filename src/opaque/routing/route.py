"""Route and RouteMatch frozen dataclasses."""

from dataclasses import dataclass
from typing import Literal

RouteKind = Literal["exact", "prefix", "fallback"]


@dataclass(frozen=True, slots=True)
class Route:
    """A single rule in the dispatch table.

    Exact:    ``/categories``        (kind="exact")
    Prefix:   ``/article/`` + param  (kind="prefix", param="id")
    Fallback: matches nothing, returned when no rule does (kind="fallback")
    """

    page: str
    pattern: str
    kind: RouteKind = "exact"
    param: str | None = None

    def __str__(self) -> str:
        if self.kind == "prefix":
            return f"{self.pattern}{{{self.param}}}"
        return self.pattern


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of dispatching an internal path. Recomputed per navigation."""

    route: Route
    params: dict[str, str]

    @property
    def page(self) -> str:
        return self.route.page

    @property
    def not_found(self) -> bool:
        return self.route.kind == "fallback"


def exact(pattern: str, page: str) -> Route:
    """Rule matching *pattern* only (trailing slash ignored)."""
    return Route(page=page, pattern=pattern)


def prefix(pattern: str, page: str, *, param: str = "id") -> Route:
    """Rule matching anything under *pattern*; the remainder becomes *param*."""
    return Route(page=page, pattern=pattern, kind="prefix", param=param)


NOT_FOUND = Route(page="not-found", pattern="", kind="fallback")
