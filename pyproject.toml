[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pimplstack"
version = "0.1.0"
description = "Two sequence containers: a growable vector with explicit capacity and a singly linked list."
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "linked list", "data structures", "containers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pimplstack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
