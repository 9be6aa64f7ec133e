"""Helpers for reading and changing the router state of an application."""

from __future__ import annotations

from typing import Callable

from viewrouter.state import App, Location, RouterState


def use_navigate(app: App) -> Callable[[str], None]:
    """Return a function that moves the application to another path."""

    def navigate(path: str) -> None:
        RouterState.of(app).location.pathname = path

    return navigate


def use_location(app: App) -> Location:
    """Return the current location."""
    return RouterState.of(app).location


def use_params(app: App) -> dict[str, str]:
    """Return the parameters captured by the last matched route."""
    return RouterState.of(app).params