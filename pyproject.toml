[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixutils"
version = "0.1.0"
description = "Small concurrency and event helpers for FIX session engines: event handler pools, timed wait groups, inactivity timers and XML loading."
requires-python = ">=3.10"
dependencies = []
keywords = ["fix", "events", "timer", "waitgroup", "concurrency", "xml"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fixutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
