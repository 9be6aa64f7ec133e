"""Placeholders for nested content, and resolving element trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from viewrouter.state import App


@dataclass(frozen=True)
class Empty:
    """An element that shows nothing."""


def render(element: Any, app: App) -> Any:
    """Resolve ``element`` until nothing in it has a ``render`` method left.

    Lists and tuples are resolved item by item; anything without a
    ``render`` method is returned as it is.
    """
    while callable(getattr(element, "render", None)):
        element = element.render(app)
    if isinstance(element, list):
        return [render(item, app) for item in element]
    if isinstance(element, tuple):
        return tuple(render(item, app) for item in element)
    return element


@dataclass
class Outlet:
    """Marks where a layout shows the element of its matched child route."""

    element: Any = field(default_factory=Empty)

    def render(self, app: App) -> Any:
        return render(self.element, app)


def outlet() -> Outlet:
    """Return an empty outlet."""
    return Outlet()