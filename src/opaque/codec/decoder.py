"""Path decoder — public URL back to internal path.

Total by construction: any input, however malformed, resolves to an
internal path. The worst case is ``/``.
"""

import logging

from opaque.codec.schemes import detect_scheme
from opaque.config import DEFAULT_CONFIG, RoutingConfig
from opaque.http.url import PublicURL

logger = logging.getLogger("opaque.codec")


def decode(url: PublicURL | str, config: RoutingConfig = DEFAULT_CONFIG) -> str:
    """Decode the internal path carried by *url*.

    Accepts a ``PublicURL`` or any URL string (absolute or path-only).
    Strings that cannot be parsed resolve to ``/``.
    """
    if isinstance(url, str):
        try:
            url = PublicURL.parse(url)
        except ValueError:
            logger.warning("Unparsable URL %r; resolving to '/'", url)
            return "/"

    scheme = detect_scheme(url, config)
    path = scheme.to_path()
    logger.debug("decode %s via %s -> %s", url, scheme.name, path)
    return path
