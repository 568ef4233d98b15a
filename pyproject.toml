[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reclists"
version = "0.1.0"
description = "Recursive lists of atoms: a reader, a writer and classic list operations"
requires-python = ">=3.10"
dependencies = []
keywords = ["lists", "recursion", "s-expressions", "atoms", "teaching"]
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
reclists = "reclists.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["reclists"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
