"""Encoding schemes — the tagged variant over supported URL forms.

Every public URL is classified into exactly one scheme by
``detect_scheme``. The order of checks in that function *is* the
precedence contract:

1. ``HashFragment``: the URL has a non-empty ``#fragment``.
2. ``LegacyCode``: a ``code`` parameter is present and no ``errorCode``
   parameter is present.
3. ``Unencoded``: anything else, including a bare ``#``.

Each variant knows how to turn itself into an internal path, so callers
never branch on the raw URL.
"""

import logging
import re
from dataclasses import dataclass

from opaque.codec.paths import normalize_path
from opaque.config import DEFAULT_CONFIG, RoutingConfig
from opaque.http.url import PublicURL

logger = logging.getLogger("opaque.codec")

# "<token>/<remainder>"; the token is discarded
LEGACY_CODE_PATTERN = re.compile(r"[^/]+/(.*)")


@dataclass(frozen=True, slots=True)
class HashFragment:
    """Current scheme: the internal path lives in the hash fragment."""

    name = "hash"

    content: str

    def to_path(self) -> str:
        return normalize_path(self.content)


@dataclass(frozen=True, slots=True)
class LegacyCode:
    """Deprecated scheme: ``?code=<token>/<path>``. Read-only.

    A code that does not match ``<token>/<remainder>`` resolves to the
    root path; it is logged, never raised.
    """

    name = "legacy"

    code: str

    def to_path(self) -> str:
        match = LEGACY_CODE_PATTERN.fullmatch(self.code)
        if match is None:
            logger.warning("Legacy code %r has no '/' separator; resolving to '/'", self.code)
            return "/"
        return "/" + match.group(1)


@dataclass(frozen=True, slots=True)
class Unencoded:
    """No usable encoding: bare navigation, a bare ``#``, or a failed legacy token."""

    name = "none"

    reason: str = "bare"

    def to_path(self) -> str:
        return "/"


EncodingScheme = HashFragment | LegacyCode | Unencoded


def detect_scheme(url: PublicURL, config: RoutingConfig = DEFAULT_CONFIG) -> EncodingScheme:
    """Classify *url* into exactly one encoding scheme. First match wins."""
    if url.fragment:
        return HashFragment(url.fragment)

    code = url.query.get(config.code_param)
    if code:
        if config.error_code_param in url.query:
            logger.debug(
                "Ignoring %s=%r: %s present",
                config.code_param,
                code,
                config.error_code_param,
            )
            return Unencoded(reason="error-code")
        return LegacyCode(code)

    if url.fragment == "":
        return Unencoded(reason="empty-hash")
    return Unencoded()
