[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "liteutil"
version = "0.1.0"
description = "Small file, path, parsing, terminal and PID-file helpers for UNIX programs"
requires-python = ">=3.10"
dependencies = []
keywords = ["files", "pidfile", "terminal", "ansi", "parsing", "unix", "copyfile", "mkpath"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Terminals",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["liteutil"]

[tool.pytest.ini_options]
addopts = "-ra"
