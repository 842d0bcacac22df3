[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deltaview"
version = "0.1.0"
description = "Building blocks for a diff viewer: token alignment by edit distance, line tokenization, ANSI escape handling and terminal colors"
requires-python = ">=3.10"
keywords = ["diff", "git", "ansi", "levenshtein", "terminal", "colors"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: Terminals",
]
dependencies = [
    "regex",
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["deltaview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
