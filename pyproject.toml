[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clipsel"
version = "2.3.0"
description = "Building blocks for a terminal browser of cclip clipboard history with tagging"
requires-python = ">=3.10"
dependencies = []
keywords = ["clipboard", "cclip", "tui", "history", "tags"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Operating System :: POSIX :: BSD",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["clipsel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
