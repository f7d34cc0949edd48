"""Navigation — the codec and dispatcher wired to a browser history.

The history is injected. ``Navigator`` only ever reads the current URL
at the start of an operation and writes URLs the encoder produced, so
the address bar never shows an internal path.

Usage::

    history = MemoryHistory("/categories")
    nav = Navigator(history)
    nav.canonicalize()            # history now at /v2/#categories
    nav.navigate("/article/42")   # pushes /v2/#article/42
    nav.resolve().params          # {"id": "42"}
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from opaque.codec import Unencoded, decode, detect_scheme, encode
from opaque.config import DEFAULT_CONFIG, RoutingConfig
from opaque.http.url import PublicURL
from opaque.pages import default_dispatcher
from opaque.routing import Dispatcher, RouteMatch

logger = logging.getLogger("opaque.navigation")

Listener = Callable[[RouteMatch], None]


@runtime_checkable
class History(Protocol):
    """The browser location and history, as far as routing needs it."""

    def current(self) -> PublicURL: ...
    def push(self, url: PublicURL) -> None: ...
    def replace(self, url: PublicURL) -> None: ...


class MemoryHistory:
    """In-memory ``History`` with a back/forward stack.

    ``load`` simulates the user typing a URL or following an external
    link: the current entry is replaced without going through the
    encoder, exactly like a direct page load.
    """

    __slots__ = ("_entries", "_index")

    def __init__(self, initial: PublicURL | str = "/") -> None:
        self._entries: list[PublicURL] = [_coerce(initial)]
        self._index = 0

    def current(self) -> PublicURL:
        return self._entries[self._index]

    def push(self, url: PublicURL) -> None:
        del self._entries[self._index + 1 :]
        self._entries.append(url)
        self._index += 1

    def replace(self, url: PublicURL) -> None:
        self._entries[self._index] = url

    def load(self, url: PublicURL | str) -> None:
        self.replace(_coerce(url))

    def back(self) -> bool:
        if self._index == 0:
            return False
        self._index -= 1
        return True

    def forward(self) -> bool:
        if self._index + 1 >= len(self._entries):
            return False
        self._index += 1
        return True

    def __len__(self) -> int:
        return len(self._entries)


def _coerce(url: PublicURL | str) -> PublicURL:
    return PublicURL.parse(url) if isinstance(url, str) else url


@dataclass(frozen=True, slots=True)
class NavigationState:
    """Snapshot of where the browser is and what it resolves to."""

    url: PublicURL
    path: str
    scheme: str
    is_opaque: bool


class Navigator:
    """Programmatic navigation over an injected ``History``."""

    __slots__ = ("_config", "_dispatcher", "_history", "_listeners")

    def __init__(
        self,
        history: History,
        dispatcher: Dispatcher | None = None,
        config: RoutingConfig = DEFAULT_CONFIG,
    ) -> None:
        self._history = history
        self._dispatcher = dispatcher or default_dispatcher()
        self._config = config
        self._listeners: list[Listener] = []

    @property
    def history(self) -> History:
        return self._history

    def navigate(self, internal_path: str, *, replace: bool = False) -> PublicURL:
        """Encode *internal_path* and push it (or replace the current entry)."""
        url = encode(internal_path, self._config)
        if replace:
            self._history.replace(url)
        else:
            self._history.push(url)
        logger.debug("navigate %r -> %s (replace=%s)", internal_path, url, replace)
        self.notify()
        return url

    def resolve(self) -> RouteMatch:
        """Decode the current URL and dispatch it. Reads history fresh."""
        return self._dispatcher.dispatch(decode(self._history.current(), self._config))

    def location(self) -> NavigationState:
        url = self._history.current()
        return NavigationState(
            url=url,
            path=decode(url, self._config),
            scheme=detect_scheme(url, self._config).name,
            is_opaque=self._config.is_opaque(url.pathname),
        )

    def canonicalize(self) -> PublicURL | None:
        """Rewrite a direct load of a bare internal path into opaque form.

        A URL that already carries a recoverable path (``/#article/5``,
        ``/?code=t/market``) keeps that path; otherwise the pathname is
        encoded. Returns the new URL, or ``None`` when the current URL is
        already opaque or is a passthrough path (API, static assets).
        """
        url = self._history.current()
        if self._config.is_opaque(url.pathname) or self._config.is_passthrough(url.pathname):
            return None
        scheme = detect_scheme(url, self._config)
        target = url.pathname
        if not isinstance(scheme, Unencoded):
            recovered = scheme.to_path()
            if recovered != "/":
                target = recovered
        opaque = encode(target, self._config)
        self._history.replace(opaque)
        logger.info("canonicalize %s -> %s", url, opaque)
        self.notify()
        return opaque

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* with a fresh match after every navigation.

        Returns a callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self) -> RouteMatch:
        """Resolve the current URL and hand the match to every listener.

        Call this for navigation the navigator did not initiate: document
        load, hash change, back/forward.
        """
        match = self.resolve()
        for listener in list(self._listeners):
            listener(match)
        return match
