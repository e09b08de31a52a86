[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consolechess"
version = "1.0.0"
description = "Chess building blocks for the terminal: board, pieces and their move rules, moves with undo, players, a text view and game saving."
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "board game", "console", "terminal", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["consolechess"]

[tool.hatch.build.targets.sdist]
include = ["consolechess", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
