[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tombgrid"
version = "0.1.0"
description = "Game shell for a grid-based puzzle game: pygame window, widget GUI with menus, XML resource loading and a Wavefront OBJ reader"
requires-python = ">=3.10"
keywords = ["game", "puzzle", "grid", "gui", "widgets", "wavefront", "obj", "mtl", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tombgrid = "tombgrid.application:main"

[tool.hatch.build.targets.wheel]
packages = ["tombgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
