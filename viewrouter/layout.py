"""Layouts: elements that wrap the content of their matched child route."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TypeVar

from viewrouter.outlet import Outlet, render
from viewrouter.state import App

C = TypeVar("C", bound=type)


class Layout(ABC):
    """An element with an outlet that a route fills with its matched child."""

    @abstractmethod
    def set_outlet(self, element: Any) -> None:
        """Put ``element`` into this layout's outlet."""

    @abstractmethod
    def render_layout(self, app: App) -> Any:
        """Render the layout together with its outlet content."""


def _has_outlet_field(cls: type) -> bool:
    for klass in cls.__mro__:
        if "outlet" in vars(klass).get("__annotations__", {}):
            return True
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        if "outlet" in slots:
            return True
    return False


def _set_outlet(self: Any, element: Any) -> None:
    self.outlet = element if isinstance(element, Outlet) else Outlet(element)


def _render_layout(self: Any, app: App) -> Any:
    return render(self.render(app), app)


def into_layout(cls: C) -> C:
    """Class decorator that makes a class with an ``outlet`` field a Layout.

    The class must declare a field named ``outlet`` and define
    ``render(self, app)``, which is what the layout renders.
    """
    if not isinstance(cls, type) or not _has_outlet_field(cls):
        raise TypeError("class must have a field named `outlet`")
    if not callable(getattr(cls, "render", None)):
        raise TypeError("class must define a `render(self, app)` method")
    cls.set_outlet = _set_outlet
    cls.render_layout = _render_layout
    Layout.register(cls)
    return cls