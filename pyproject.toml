[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uniwar"
version = "0.1.0"
description = "Building blocks for a multi-player real-time space war game: galaxy, scoring, score file, message framing and terminal views"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "space", "war", "multiplayer", "terminal", "strategy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["uniwar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
