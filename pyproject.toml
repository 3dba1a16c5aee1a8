[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enfrendados"
version = "1.0.0"
description = "A two-player terminal dice game: match a target number with your dice and get rid of your stock."
requires-python = ">=3.10"
dependencies = []
keywords = ["dice", "game", "terminal", "two-player", "console"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
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

[project.scripts]
enfrendados = "enfrendados.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["enfrendados"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
