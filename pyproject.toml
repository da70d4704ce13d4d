[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minesweeper"
version = "1.0.0"
description = "The classic Minesweeper puzzle game in a Tk window"
requires-python = ">=3.10"
dependencies = []
keywords = ["minesweeper", "game", "puzzle", "tkinter"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minesweeper = "minesweeper.app:main"

[tool.hatch.build.targets.wheel]
packages = ["minesweeper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
