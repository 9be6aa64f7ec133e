"""A plain container for router content."""

from __future__ import annotations

from typing import Any, Iterable

from viewrouter.outlet import render as render_element
from viewrouter.state import App


class Router:
    """Holds child elements and renders them in order."""

    def __init__(self) -> None:
        self._children: list[Any] = []

    def child(self, child: Any) -> Router:
        """Add a child element."""
        self._children.append(child)
        return self

    def children(self, children: Iterable[Any]) -> Router:
        """Add several child elements."""
        self._children.extend(children)
        return self

    def render(self, app: App) -> list[Any]:
        """Return the rendered children."""
        return [render_element(child, app) for child in self._children]


def router() -> Router:
    """Return an empty router."""
    return Router()