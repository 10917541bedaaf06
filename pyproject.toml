[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "game2d"
version = "0.1.0"
description = "Core building blocks for a 2D role-playing game: game enumerations, an event dispatcher, vector and viewport types."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "2d", "rpg", "events", "vector", "viewport", "camera"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["game2d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
