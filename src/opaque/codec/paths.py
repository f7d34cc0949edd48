"""Internal path normalization."""


def normalize_path(path: str) -> str:
    """Return *path* with a guaranteed leading ``/``.

    The empty string becomes ``/``. Nothing else is touched: trailing
    slashes, query-like suffixes, and percent-escapes are the
    dispatcher's concern.
    """
    if not path:
        return "/"
    if not path.startswith("/"):
        return f"/{path}"
    return path
