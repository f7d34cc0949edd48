"""PublicURL — the address-bar view of a location.

A frozen (pathname, query, fragment) triple. The browser owns the real
location; these values are snapshots read at the start of a navigation
and discarded afterwards.
"""

from dataclasses import dataclass, field
from urllib.parse import urlsplit

from opaque.http.query import QueryParams


@dataclass(frozen=True, slots=True)
class PublicURL:
    """A browser location split into the parts routing cares about.

    ``fragment`` is ``None`` when the URL carries no ``#`` at all and
    ``""`` for a bare trailing ``#``. Scheme and host are dropped:
    routing only ever looks at same-document locations.
    """

    pathname: str = "/"
    query: QueryParams = field(default_factory=QueryParams)
    fragment: str | None = None

    @classmethod
    def parse(cls, text: str) -> "PublicURL":
        """Parse an absolute URL or a path-only reference.

        Raises ``ValueError`` for URLs ``urlsplit`` rejects (e.g. a bad
        IPv6 netloc). Callers on the navigation path catch it.
        """
        text = text.strip()
        parts = urlsplit(text)
        fragment: str | None = parts.fragment
        if not fragment and "#" not in text:
            fragment = None
        return cls(
            pathname=parts.path or "/",
            query=QueryParams(parts.query),
            fragment=fragment,
        )

    @property
    def search(self) -> str:
        """The ``?query`` part, or ``""`` when there is no query."""
        raw = str(self.query)
        return f"?{raw}" if raw else ""

    @property
    def hash(self) -> str:
        """The ``#fragment`` part, or ``""`` when there is no fragment."""
        return "" if self.fragment is None else f"#{self.fragment}"

    def __str__(self) -> str:
        return f"{self.pathname}{self.search}{self.hash}"
