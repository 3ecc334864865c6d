[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "serpent"
version = "0.1.0"
description = "A terminal snake game with coloured sections and random fruit."
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "terminal", "curses", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
serpent = "serpent.game:main"

[tool.hatch.build.targets.wheel]
packages = ["serpent"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
