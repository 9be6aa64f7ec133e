from dataclasses import dataclass, field

import pytest

from viewrouter.hooks import use_navigate
from viewrouter.layout import into_layout
from viewrouter.matcher import InsertError
from viewrouter.outlet import Empty, Outlet
from viewrouter.route import Route, RouteConfigError, route
from viewrouter.state import App, init


@into_layout
@dataclass
class Frame:
    name: str
    outlet: Outlet = field(default_factory=Outlet)

    def render(self, app):
        return (self.name, self.outlet)


@pytest.fixture
def app():
    application = App()
    init(application)
    return application


def test_path_route_matches_only_its_path():
    about = Route().path("about").element("about")
    assert about.in_pattern("/", "/about")
    assert not about.in_pattern("/", "/other")
    assert len(about.build_route_map("/")) == 1


def test_index_route_matches_root():
    home = Route().index().element("home")
    assert home.in_pattern("/", "/")
    assert not home.in_pattern("/", "/about")


def test_catch_all_matches_other_paths():
    fallback = Route().path("{*not_match}").element("not_match")
    assert fallback.in_pattern("/", "/nothing-here")
    assert fallback.build_route_map("/").at("/nothing-here").params == {
        "not_match": "nothing-here"
    }


def test_nested_route_map_collects_all_leaves():
    tree = (
        Route()
        .layout(Frame("nav"))
        .child(Route().index().element("home"))
        .child(
            Route()
            .path("user")
            .layout(Frame("user"))
            .child(Route().index().element("list"))
            .child(Route().path("{id}").element("user"))
        )
    )
    matcher = tree.build_route_map("/")
    assert len(matcher) == 3
    assert matcher.at("/user/5").params == {"id": "5"}
    assert tree.in_pattern("/", "/user")
    assert tree.in_pattern("/", "/")


def test_element_then_layout_is_rejected():
    with pytest.raises(RouteConfigError):
        Route().element("x").layout(Frame("f"))


def test_layout_then_element_is_rejected():
    with pytest.raises(RouteConfigError):
        Route().layout(Frame("f")).element("x")


def test_index_after_path_is_rejected():
    with pytest.raises(RouteConfigError):
        Route().path("about").index()


def test_duplicate_children_conflict():
    tree = Route().children([Route().path("a").element(1), Route().path("a").element(2)])
    with pytest.raises(InsertError):
        tree.build_route_map("/")


def test_render_returns_element(app):
    assert Route().path("about").element("about").render(app) == "about"


def test_render_without_element_or_layout_is_empty(app):
    assert Route().path("x").render(app) == Empty()


def test_render_layout_fills_outlet(app):
    use_navigate(app)("/about")
    tree = (
        Route()
        .layout(Frame("nav"))
        .child(Route().index().element("home"))
        .child(Route().path("about").element("about"))
    )
    assert tree.render(app) == ("nav", "about")


def test_render_layout_without_match_leaves_outlet_empty(app):
    use_navigate(app)("/missing")
    tree = Route().layout(Frame("nav")).child(Route().path("about").element("about"))
    assert tree.render(app) == ("nav", Empty())


def test_render_nested_layout_with_path(app):
    use_navigate(app)("/user/3")
    tree = (
        Route()
        .path("user")
        .layout(Frame("user"))
        .child(Route().path("{id}").element("profile"))
        .with_basename("/")
    )
    assert tree.render(app) == ("user", "profile")


def test_with_basename_prefixes_children(app):
    use_navigate(app)("/app/x")
    tree = Route().layout(Frame("f")).child(Route().path("x").element("x")).with_basename("/app")
    assert tree.render(app) == ("f", "x")


def test_route_factory_and_text():
    empty = route()
    assert len(empty.build_route_map("/")) == 0
    assert str(empty) == "Route"
    assert "routes=0" in repr(empty)