"""Path pattern matching with static, parameter and catch-all segments.

Patterns are split on ``/``. A segment is either literal text, a named
parameter ``{name}`` that matches one non-empty segment, or a catch-all
``{*name}`` that matches the non-empty rest of the path and must come last.
Literal braces are written doubled: ``{{`` and ``}}``.

When several patterns could match, literal segments win over parameters,
and parameters win over catch-alls, with backtracking when a preferred
branch leads nowhere.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_MISSING: Any = object()


class InsertError(ValueError):
    """A pattern could not be added to a matcher."""


class MatchError(LookupError):
    """No pattern matches the given path."""


@dataclass(frozen=True)
class Match(Generic[T]):
    """The value stored for a matching pattern and the captured parameters."""

    value: T
    params: dict[str, str] = field(default_factory=dict)


class _Kind(Enum):
    STATIC = "static"
    PARAM = "param"
    CATCH_ALL = "catch-all"


class _Node:
    __slots__ = ("statics", "param_name", "param", "catch_all_name", "catch_all_value", "value")

    def __init__(self) -> None:
        self.statics: dict[str, _Node] = {}
        self.param_name: str | None = None
        self.param: _Node | None = None
        self.catch_all_name: str | None = None
        self.catch_all_value: Any = _MISSING
        self.value: Any = _MISSING


def _parse_segment(segment: str, route: str) -> tuple[_Kind, str]:
    if segment.startswith("{") and not segment.startswith("{{"):
        if not segment.endswith("}"):
            raise InsertError(f"unterminated parameter in route {route!r}")
        inner = segment[1:-1]
        catch_all = inner.startswith("*")
        name = inner[1:] if catch_all else inner
        if not name:
            raise InsertError(f"parameter without a name in route {route!r}")
        if "{" in name or "}" in name or "*" in name:
            raise InsertError(f"invalid parameter {segment!r} in route {route!r}")
        return (_Kind.CATCH_ALL if catch_all else _Kind.PARAM), name
    unescaped = segment.replace("{{", "").replace("}}", "")
    if "{" in unescaped or "}" in unescaped:
        raise InsertError(
            f"parameters must fill a whole segment; got {segment!r} in route {route!r}"
        )
    return _Kind.STATIC, segment.replace("{{", "{").replace("}}", "}")


class PathMatcher(Generic[T]):
    """Maps route patterns to values and looks paths up among them."""

    def __init__(self) -> None:
        self._root = _Node()
        self._routes: list[tuple[str, T]] = []

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        patterns = [path for path, _ in self._routes]
        return f"PathMatcher({patterns!r})"

    def insert(self, path: str, value: T) -> None:
        """Add ``path`` with ``value``; raise InsertError on a conflict."""
        tokens = [_parse_segment(segment, path) for segment in path.split("/")]
        for position, (kind, _) in enumerate(tokens):
            if kind is _Kind.CATCH_ALL and position != len(tokens) - 1:
                raise InsertError(f"catch-all must be the last segment of route {path!r}")

        node = self._root
        for kind, text in tokens:
            if kind is _Kind.STATIC:
                node = node.statics.setdefault(text, _Node())
            elif kind is _Kind.PARAM:
                if node.param is None:
                    node.param_name = text
                    node.param = _Node()
                elif node.param_name != text:
                    raise InsertError(
                        f"parameter {{{text}}} in route {path!r} conflicts with "
                        f"existing parameter {{{node.param_name}}}"
                    )
                node = node.param
            else:
                if node.catch_all_value is not _MISSING:
                    raise InsertError(f"route {path!r} conflicts with an existing catch-all")
                node.catch_all_name = text
                node.catch_all_value = value
                self._routes.append((path, value))
                return

        if node.value is not _MISSING:
            raise InsertError(f"route {path!r} conflicts with an existing route")
        node.value = value
        self._routes.append((path, value))

    def merge(self, other: PathMatcher[T]) -> None:
        """Insert every route of ``other``; raise InsertError listing all conflicts."""
        errors = []
        for path, value in list(other._routes):
            try:
                self.insert(path, value)
            except InsertError as error:
                errors.append(str(error))
        if errors:
            raise InsertError("; ".join(errors))

    def at(self, path: str) -> Match[T]:
        """Return the best match for ``path``; raise MatchError if there is none."""
        found = self._search(self._root, path.split("/"), 0, {})
        if found is None:
            raise MatchError(f"no route matches {path!r}")
        value, params = found
        return Match(value, params)

    def _search(
        self, node: _Node, segments: list[str], index: int, params: dict[str, str]
    ) -> tuple[Any, dict[str, str]] | None:
        if index == len(segments):
            if node.value is not _MISSING:
                return node.value, params
            return None

        segment = segments[index]
        child = node.statics.get(segment)
        if child is not None:
            found = self._search(child, segments, index + 1, params)
            if found is not None:
                return found

        if node.param is not None and segment:
            found = self._search(
                node.param, segments, index + 1, {**params, node.param_name: segment}
            )
            if found is not None:
                return found

        if node.catch_all_value is not _MISSING:
            rest = "/".join(segments[index:])
            if rest:
                return node.catch_all_value, {**params, node.catch_all_name: rest}

        return None