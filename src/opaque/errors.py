"""Opaque exception hierarchy.

Raised only while building configuration or route tables. Decoding and
dispatching never raise: every URL resolves to a path, every path to a
route.
"""


class OpaqueError(Exception):
    """Base for all opaque-specific errors."""


class ConfigurationError(OpaqueError):
    """Raised when routing configuration or a route table is invalid.

    Typically raised at import or startup time, when ``RoutingConfig``
    or a ``Dispatcher`` is constructed.
    """
