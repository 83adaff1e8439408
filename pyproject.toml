[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "problemset"
version = "0.1.0"
description = "Solutions to a collection of introductory programming exercises, usable as a library or from the command line"
requires-python = ">=3.10"
keywords = ["exercises", "algorithms", "patterns", "education", "puzzles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
problemset = "problemset.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["problemset"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
