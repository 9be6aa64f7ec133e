"""Application globals and the router's shared state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeVar

G = TypeVar("G")


class App:
    """Application context holding one global value per type."""

    def __init__(self) -> None:
        self._globals: dict[type, Any] = {}

    def set_global(self, value: Any) -> None:
        """Store ``value`` as the global of its own type, replacing any earlier one."""
        self._globals[type(value)] = value

    def get_global(self, kind: type[G]) -> G:
        """Return the global of type ``kind``; raise LookupError if it was never set."""
        try:
            return self._globals[kind]
        except KeyError:
            raise LookupError(f"no global of type {kind.__name__} has been set") from None

    def has_global(self, kind: type) -> bool:
        return kind in self._globals


@dataclass
class Location:
    """Where the application currently is."""

    pathname: str = "/"
    state: dict[str, str] = field(default_factory=dict)


@dataclass
class PathMatch:
    """How a route pattern matched a pathname."""

    pathname: str
    pathname_base: str
    pattern: str
    params: dict[str, str] = field(default_factory=dict)


@dataclass
class RouterState:
    """The router's global state: current location and captured parameters."""

    location: Location = field(default_factory=Location)
    path_match: PathMatch | None = None
    params: dict[str, str] = field(default_factory=dict)

    @classmethod
    def init(cls, app: App) -> None:
        """Install a fresh router state in ``app``."""
        app.set_global(cls())

    @classmethod
    def of(cls, app: App) -> RouterState:
        """Return the router state installed in ``app``."""
        return app.get_global(cls)

    def with_path(self, pathname: str) -> RouterState:
        self.location.pathname = pathname
        return self


def init(app: App) -> None:
    """Prepare ``app`` for routing."""
    RouterState.init(app)