[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "greed"
version = "0.1.0"
description = "A small game engine core: typed events with category flags, dispatching, console logging and an application loop."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "events", "logging"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
greed = "greed.main:main"

[tool.hatch.build.targets.wheel]
packages = ["greed"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
