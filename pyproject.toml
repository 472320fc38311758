[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mangos"
version = "0.1.0"
description = "Pipes, dialers, listeners and error codes for a Scalability Protocols messaging core"
requires-python = ">=3.10"
keywords = ["nanomsg", "scalability-protocols", "messaging", "networking", "pipes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mangos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
