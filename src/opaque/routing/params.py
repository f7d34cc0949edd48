"""Path parameter extraction.

Parameters are always strings. ``"abc"`` for a numeric id is passed
through; parsing belongs to the page that receives it.
"""

from urllib.parse import unquote


def extract_param(path: str, pattern: str) -> str:
    """Return the percent-decoded part of *path* after *pattern*.

    The caller guarantees ``path.startswith(pattern)``. An empty
    remainder is returned as ``""``.
    """
    return unquote(path[len(pattern) :])


def strip_path(path: str) -> str:
    """Canonical form used for exact matching.

    Drops anything from the first ``?`` and a trailing ``/`` (except on
    the root itself).
    """
    path = path.split("?", 1)[0]
    if len(path) > 1 and path.endswith("/"):
        path = path.rstrip("/") or "/"
    return path
