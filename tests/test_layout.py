from dataclasses import dataclass, field

import pytest

from viewrouter.layout import Layout, into_layout
from viewrouter.outlet import Empty, Outlet
from viewrouter.state import App


@into_layout
@dataclass
class Nav:
    outlet: Outlet = field(default_factory=Outlet)

    def render(self, app):
        return ["nav", self.outlet]


def test_layout_base_is_abstract():
    with pytest.raises(TypeError):
        Layout()


def test_decorated_class_is_a_layout():
    @dataclass
    class Plain:
        outlet: Outlet = field(default_factory=Outlet)

        def render(self, app):
            return self.outlet

    decorated = into_layout(Plain)
    layout = decorated()
    assert isinstance(layout, Layout)
    layout.set_outlet("home")
    assert layout.render_layout(App()) == "home"


def test_render_layout_with_empty_outlet():
    assert Nav().render_layout(App()) == ["nav", Empty()]


def test_set_outlet_wraps_element():
    nav = Nav()
    nav.set_outlet("home")
    assert nav.outlet == Outlet("home")
    assert nav.render_layout(App()) == ["nav", "home"]


def test_set_outlet_keeps_an_outlet_as_is():
    nav = Nav()
    given = Outlet("about")
    nav.set_outlet(given)
    assert nav.outlet is given


def test_nested_layouts_render_through():
    inner = Nav()
    inner.set_outlet("user")
    outer = Nav()
    outer.set_outlet(inner)
    assert outer.render_layout(App()) == ["nav", ["nav", "user"]]


def test_class_without_outlet_is_rejected():
    @dataclass
    class NoOutlet:
        content: str = ""

        def render(self, app):
            return self.content

    with pytest.raises(TypeError, match="outlet"):
        into_layout(NoOutlet)


def test_class_without_render_is_rejected():
    class NoRender:
        outlet: Outlet

    with pytest.raises(TypeError, match="render"):
        into_layout(NoRender)


def test_slots_outlet_is_accepted():
    @into_layout
    class Slotted:
        __slots__ = ("outlet",)

        def __init__(self):
            self.outlet = Outlet()

        def render(self, app):
            return self.outlet

    layout = Slotted()
    layout.set_outlet("dashboard")
    assert layout.render_layout(App()) == "dashboard"