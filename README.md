# viewrouter

A small declarative router for view trees. You describe routes as a tree.
Each route holds either an element, or a layout with an outlet for its
nested routes. Rendering picks the branch that matches the current path.
Dynamic segments such as `{id}` and catch-all segments such as `{*rest}` are
captured as parameters.

Elements are plain Python values. Anything with a `render(app)` method is
resolved by `viewrouter.outlet.render`, and anything else is returned as it
is.

## Installation

```
pip install viewrouter
```

## Quick start

```python
from viewrouter.state import App, init
from viewrouter.routes import Routes
from viewrouter.route import Route
from viewrouter.hooks import use_navigate, use_params
from viewrouter.outlet import render

app = App()
init(app)  # installs a RouterState at "/"

routes = (
    Routes()
    .basename("/")
    .child(Route().index().element("home"))
    .child(Route().path("about").element("about"))
    .child(Route().path("user/{id}").element("user"))
    .child(Route().path("{*not_match}").element("not_match"))
)

print(render(routes.render(app), app))   # home

navigate = use_navigate(app)
navigate("/user/7")
print(render(routes.render(app), app))   # user
print(use_params(app)["id"])             # 7
```

`Routes.render` raises `RuntimeError` if `init` was not called on the app.
When no route matches, it returns an `Empty` element. `use_location(app)`
returns the current `Location`, whose `pathname` is the current path.

## Nested layouts

A layout is a class that declares an `outlet` field and defines
`render(self, app)`. Decorate it with `into_layout` and the matched child
route is put into that outlet:

```python
from viewrouter.layout import into_layout
from viewrouter.outlet import Outlet

@into_layout
class Shell:
    outlet: Outlet

    def __init__(self):
        self.outlet = Outlet()

    def render(self, app):
        return ["nav", self.outlet.render(app)]

app = App()
init(app)
use_navigate(app)("/about")

routes = Routes().child(
    Route()
    .layout(Shell())
    .child(Route().index().element("home"))
    .child(Route().path("about").element("about"))
)
print(render(routes.render(app), app))   # ['nav', 'about']
```

`into_layout` raises `TypeError` when the class has no `outlet` field or no
`render` method. A route with a layout takes its child routes when it is
rendered, so build the route tree again for each render.

If you set both an element and a layout on one route, or both `index()` and
`path()`, you get a `RouteConfigError`.

## Navigation links and containers

`NavLink().to("/about").child("About")` renders to an element whose `id` is
the target path, with its rendered children and an `on_click` callback.
`click(app)` moves the router's location to the target. `Router` is a plain
container whose `render(app)` returns its rendered children in order.

## Matching paths directly

`viewrouter.matcher.PathMatcher` maps patterns to values. `insert` raises
`InsertError` on a conflicting pattern, and `at(path)` returns a `Match`
holding the value and the captured `params`, or raises `MatchError`. Literal
segments win over parameters, and parameters win over catch-alls.

## What it does not do

The package keeps no history and draws nothing on screen. It resolves route
trees into plain values, and showing them is up to you.

## Running the tests

```
pip install -e ".[test]"
pytest
```