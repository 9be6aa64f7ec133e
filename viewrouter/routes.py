"""Routes: picks the branch of routes that matches the current path."""

from __future__ import annotations

from typing import Any, Iterable

from viewrouter.matcher import MatchError, PathMatcher
from viewrouter.outlet import Empty
from viewrouter.route import Route
from viewrouter.state import App, RouterState


class Routes:
    """Renders the route that best matches the current path."""

    def __init__(self) -> None:
        self._basename = "/"
        self._routes: list[Route] = []

    def basename(self, basename: str) -> Routes:
        """Set the path every route is relative to."""
        self._basename = basename
        return self

    def child(self, child: Route) -> Routes:
        """Add a route."""
        self._routes.append(child)
        return self

    def children(self, children: Iterable[Route]) -> Routes:
        """Add several routes."""
        for child in children:
            self.child(child)
        return self

    def routes(self) -> tuple[Route, ...]:
        """Return the routes added so far."""
        return tuple(self._routes)

    def render(self, app: App) -> Any:
        """Return the matching route, storing its parameters in the router state."""
        if not app.has_global(RouterState):
            raise RuntimeError("RouterState not initialized")

        matcher: PathMatcher[None] = PathMatcher()
        for route in self._routes:
            matcher.merge(route.build_route_map(self._basename))

        state = RouterState.of(app)
        pathname = state.location.pathname
        try:
            matched = matcher.at(pathname)
        except MatchError:
            return Empty()

        state.params.update(matched.params)
        for route in self._routes:
            if route.in_pattern(self._basename, pathname):
                return route.with_basename(self._basename)
        return Empty()