[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deadmansdraw"
version = "0.1.0"
description = "A two-player, push-your-luck pirate card game for the terminal."
requires-python = ">=3.10"
dependencies = []
keywords = ["card game", "push your luck", "terminal game", "pirates"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
deadmansdraw = "deadmansdraw.game:main"

[tool.hatch.build.targets.wheel]
packages = ["deadmansdraw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
