[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eits"
version = "0.1.0"
description = "A small homotopy type theory kernel with an interactive terminal REPL"
requires-python = ">=3.10"
keywords = ["type theory", "hott", "repl", "lexer", "parser", "universe levels"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
eits-repl = "eits.repl:main"
eits-demo = "eits.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["eits"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
