[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moshkit"
version = "0.1.0"
description = "Terminal-session utilities: monotonic millisecond timestamps, complete writes to file descriptors, locale checks and pseudo-terminal helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "pty", "locale", "timestamp", "shell"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["moshkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
