[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mosaic"
version = "0.0.1"
description = "Input handling core for games: key and button state tracking, named actions, cursor and wheel analytics, plus small thread-safe containers"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "input", "keyboard", "mouse", "actions", "result", "thread-safe"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mosaic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
