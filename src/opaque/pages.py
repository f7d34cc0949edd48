"""The application's page table.

Order matters: ``/postguild`` routes sit above the generic ``/guild/``
prefix, and every exact route precedes the prefix route that shares
its leading segment.
"""

from opaque.routing import Dispatcher, Route, RouteMatch, exact, prefix

PAGE_ROUTES: tuple[Route, ...] = (
    exact("/", "home"),
    exact("/categories", "categories"),
    exact("/trending", "trending"),
    exact("/question", "question"),
    exact("/market", "market"),
    exact("/profile", "profile"),
    exact("/iq-test", "iq-test"),
    exact("/page", "page-posts"),
    exact("/page-create", "page-create"),
    prefix("/page-post/", "page-post", param="post_id"),
    exact("/database", "database"),
    exact("/guilds", "guilds"),
    exact("/postguild", "post-guild"),
    prefix("/postguild/", "post-guild"),
    prefix("/guild/", "guild"),
    exact("/reset-password", "reset-password"),
    prefix("/category/", "category", param="slug"),
    exact("/create-article", "create-article"),
    prefix("/article/", "article"),
    prefix("/user/", "user", param="user_id"),
    exact("/auth", "auth"),
    exact("/login", "auth"),
    exact("/register", "auth"),
    exact("/help-center", "help-center"),
    exact("/terms-of-service", "terms-of-service"),
    exact("/privacy-policy", "privacy-policy"),
    exact("/cookie-policy", "cookie-policy"),
)


def default_dispatcher() -> Dispatcher:
    """A fresh dispatcher over ``PAGE_ROUTES``."""
    return Dispatcher(PAGE_ROUTES)


_default = default_dispatcher()


def dispatch(internal_path: str, dispatcher: Dispatcher | None = None) -> RouteMatch:
    """Dispatch *internal_path* against *dispatcher* or the page table."""
    return (dispatcher or _default).dispatch(internal_path)
