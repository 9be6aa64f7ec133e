"""Links that move the application to another path when clicked."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from viewrouter.hooks import use_navigate
from viewrouter.outlet import render as render_element
from viewrouter.state import App


@dataclass(frozen=True)
class _NavLinkElement:
    id: str
    children: list[Any]
    on_click: Callable[[], None]


class NavLink:
    """A clickable element that navigates to its target path."""

    def __init__(self) -> None:
        self._to = ""
        self._children: list[Any] = []

    def __repr__(self) -> str:
        return f"NavLink(to={self._to!r}, children={len(self._children)})"

    def to(self, to: str) -> NavLink:
        """Set the path to navigate to."""
        self._to = to
        return self

    def child(self, child: Any) -> NavLink:
        """Add a child element."""
        self._children.append(child)
        return self

    def children(self, children: Iterable[Any]) -> NavLink:
        """Add several child elements."""
        self._children.extend(children)
        return self

    def click(self, app: App) -> None:
        """Navigate ``app`` to this link's target."""
        use_navigate(app)(self._to)

    def render(self, app: App) -> _NavLinkElement:
        """Return an element identified by the target path with a click handler."""
        return _NavLinkElement(
            id=self._to,
            children=[render_element(child, app) for child in self._children],
            on_click=lambda: self.click(app),
        )