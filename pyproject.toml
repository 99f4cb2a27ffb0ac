[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "angrycube"
version = "0.1.0"
description = "Roll an ever-angrier cube across a grid and squash enemies before it loses its temper."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "puzzle", "cube", "pygame", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
test = [
    "pytest",
]

[project.scripts]
angrycube = "angrycube.game:main"

[tool.hatch.build.targets.wheel]
packages = ["angrycube"]

[tool.pytest.ini_options]
addopts = "-ra"
