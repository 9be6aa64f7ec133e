"""Routes: a pattern paired with an element, or with a layout and child routes."""

from __future__ import annotations

from typing import Any, Iterable

from viewrouter.matcher import MatchError, PathMatcher
from viewrouter.outlet import Empty
from viewrouter.state import App, RouterState

_UNSET: Any = object()


class RouteConfigError(ValueError):
    """A route was given settings that exclude each other."""


def _join(basename: str, path: str | None) -> str:
    base = basename.rstrip("/")
    return base if path is None else f"{base}/{path}"


class Route:
    """Configures an element to show when a pattern matches the current path.

    A route either carries an element, or a layout whose outlet is filled
    with the first child route that matches. It is rendered by ``Routes``.
    """

    def __init__(self) -> None:
        self._basename = ""
        self._path: str | None = None
        self._element: Any = _UNSET
        self._routes: list[Route] = []
        self._layout: Any = None

    def __repr__(self) -> str:
        return (
            f"Route(basename={self._basename!r}, path={self._path!r}, "
            f"layout={self._layout is not None}, element={self._element is not _UNSET}, "
            f"routes={len(self._routes)})"
        )

    def __str__(self) -> str:
        return "Route"

    def path(self, path: str) -> Route:
        """Set the path to match against the current location."""
        self._path = path
        return self

    def element(self, element: Any) -> Route:
        """Set the element shown when this route matches."""
        if self._layout is not None:
            raise RouteConfigError("Route element and layout cannot be set at the same time")
        self._element = element
        return self

    def layout(self, layout: Any) -> Route:
        """Set the layout that wraps the matched child route."""
        if self._element is not _UNSET:
            raise RouteConfigError("Route element and layout cannot be set at the same time")
        self._layout = layout
        return self

    def index(self) -> Route:
        """Make this the route shown at its parent's own path."""
        if self._path is not None:
            raise RouteConfigError("Route index and path cannot be set at the same time")
        return self.path("")

    def child(self, child: Route) -> Route:
        """Add a child route."""
        self._routes.append(child)
        return self

    def children(self, children: Iterable[Route]) -> Route:
        """Add several child routes."""
        for child in children:
            self.child(child)
        return self

    def with_basename(self, basename: str) -> Route:
        """Set the path this route's own path is relative to."""
        self._basename = basename
        return self

    def build_route_map(self, basename: str) -> PathMatcher[None]:
        """Return a matcher holding every full pattern this route can match."""
        full = _join(basename, self._path)
        if full != "/":
            full = full.rstrip("/")

        matcher: PathMatcher[None] = PathMatcher()
        if self._element is not _UNSET:
            matcher.insert(full, None)
            return matcher

        for route in self._routes:
            matcher.merge(route.build_route_map(full))
        return matcher

    def in_pattern(self, basename: str, path: str) -> bool:
        """Tell whether ``path`` matches this route below ``basename``."""
        try:
            self.build_route_map(basename).at(path)
        except MatchError:
            return False
        return True

    def render(self, app: App) -> Any:
        """Return the element, the filled layout, or an empty element."""
        if self._element is not _UNSET:
            return self._element

        if self._layout is not None:
            pathname = RouterState.of(app).location.pathname
            basename = _join(self._basename, self._path)
            routes, self._routes = self._routes, []
            matched = next(
                (route for route in routes if route.in_pattern(basename, pathname)), None
            )
            if matched is not None:
                self._layout.set_outlet(matched.with_basename(basename).render(app))
            return self._layout.render_layout(app)

        return Empty()


def route() -> Route:
    """Return a new, unconfigured route."""
    return Route()