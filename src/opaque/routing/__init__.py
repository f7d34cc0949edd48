"""Routing — ordered rule table mapping internal paths to pages.

Rules are checked in registration order and the first match wins, so
more specific patterns must be registered before generic ones.
"""

from opaque.routing.route import NOT_FOUND, Route, RouteMatch, exact, prefix
from opaque.routing.router import Dispatcher

__all__ = ["NOT_FOUND", "Dispatcher", "Route", "RouteMatch", "exact", "prefix"]
