"""Declarative path routing for view trees: routes, layouts, outlets and links."""

__version__ = "0.1.1"

__all__ = [
    "hooks",
    "layout",
    "matcher",
    "nav_link",
    "outlet",
    "route",
    "router",
    "routes",
    "state",
]