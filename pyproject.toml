[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gprengine"
version = "0.1.0"
description = "A small 2D game engine with vector and matrix maths, an observer-driven frame loop and a pygame window and renderer."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game engine", "vector", "matrix", "linear algebra", "observer", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gprengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
