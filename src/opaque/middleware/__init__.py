"""Middleware — server-side helpers for the opaque URL scheme.

Built-in middleware:
    OpaqueRedirectMiddleware -- Redirect direct loads of bare paths to their opaque form
"""

from opaque.middleware.redirect import OpaqueRedirectMiddleware

__all__ = ["OpaqueRedirectMiddleware"]
