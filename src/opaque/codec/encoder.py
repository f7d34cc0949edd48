"""Path encoder — internal path to opaque public URL.

Pure: nothing here touches history. Callers push the returned URL.
"""

import logging
import secrets
import string

from opaque.codec.paths import normalize_path
from opaque.config import DEFAULT_CONFIG, RoutingConfig
from opaque.http.query import QueryParams
from opaque.http.url import PublicURL

logger = logging.getLogger("opaque.codec")

_CODE_ALPHABET = string.ascii_letters + string.digits
_ERROR_CODE_ALPHABET = string.ascii_lowercase + string.digits


def _random_token(alphabet: str, length: int) -> str:
    return "".join(secrets.choice(alphabet) for _ in range(length))


def _decoy_query(config: RoutingConfig) -> QueryParams:
    """A random ``code`` paired with an ``errorCode``.

    The ``errorCode`` marks the ``code`` as unusable for legacy recovery,
    so a decoy can never resolve to anything but the hash path.
    """
    return QueryParams.from_pairs(
        [
            (config.code_param, _random_token(_CODE_ALPHABET, config.code_length)),
            (
                config.error_code_param,
                _random_token(_ERROR_CODE_ALPHABET, config.error_code_length),
            ),
        ]
    )


def encode(internal_path: str, config: RoutingConfig = DEFAULT_CONFIG) -> PublicURL:
    """Encode *internal_path* into its hash-fragment public URL.

    The leading ``/`` is stripped from the fragment and restored by
    ``decode``. A path without one is normalized first, never rejected.

    Examples::

        encode("/article/42")  -> /v2/#article/42
        encode("categories")   -> /v2/#categories
        encode("")             -> /v2/#
    """
    path = normalize_path(internal_path)
    query = _decoy_query(config) if config.decoy_params else QueryParams()
    url = PublicURL(pathname=config.opaque_root, query=query, fragment=path[1:])
    logger.debug("encode %r -> %s", internal_path, url)
    return url


def encode_link(internal_path: str, config: RoutingConfig = DEFAULT_CONFIG) -> str:
    """Encode *internal_path* and render it for an ``href`` attribute."""
    return str(encode(internal_path, config))
