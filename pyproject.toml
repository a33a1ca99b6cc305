[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ergo"
version = "0.1.0"
description = "A tiny term language with an evaluator and a zipper-based terminal structure editor"
requires-python = ">=3.10"
keywords = ["interpreter", "lambda", "zipper", "structure-editor", "terminal"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ergo = "ergo.editor:main"

[tool.hatch.build.targets.wheel]
packages = ["ergo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
