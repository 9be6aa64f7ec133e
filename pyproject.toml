[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "viewrouter"
version = "0.1.1"
description = "A declarative path router for view trees: routes, nested layouts, outlets and navigation links."
requires-python = ">=3.10"
keywords = ["router", "routing", "ui", "layout", "navigation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["viewrouter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
