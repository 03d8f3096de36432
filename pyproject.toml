[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wmstate"
version = "0.1.0"
description = "Window manager state model: geometry, windows, workspaces, tags, focus and layout bookkeeping"
requires-python = ">=3.10"
dependencies = []
keywords = ["window-manager", "tiling", "workspace", "tags", "geometry"]
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
    "Topic :: Desktop Environment :: Window Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wmstate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
