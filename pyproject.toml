[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clargs"
version = "0.1.0"
description = "A small schema-driven command-line argument parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["argv", "command-line", "options", "parser", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clargs-arithmetic = "clargs.arithmetic:main"
clargs-noschema = "clargs.noschema:main"

[tool.hatch.build.targets.wheel]
packages = ["clargs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
