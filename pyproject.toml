[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wcx"
version = "0.1.0"
description = "Small building blocks for control loops and embedded-style software: filters, PID, timers, debouncing, framing, CRCs and serialization."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "embedded",
    "pid",
    "filter",
    "debounce",
    "crc",
    "ring-buffer",
    "state-machine",
    "fixed-point",
    "framing",
    "serialization",
]
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
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wcx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
