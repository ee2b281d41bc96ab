[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dames"
version = "0.1.0"
description = "Checkers (draughts) board model with move generation, chained captures and promotion"
requires-python = ">=3.10"
dependencies = []
keywords = ["checkers", "draughts", "dames", "board game", "game"]
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
    "Topic :: Games/Entertainment :: Board Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
