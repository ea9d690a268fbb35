[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clubledger"
version = "0.1.0"
description = "Replays a computer club's daily event log and reports the event history and per-table revenue."
requires-python = ">=3.10"
dependencies = []
keywords = ["computer club", "events", "revenue", "billing", "queue"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clubledger = "clubledger.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["clubledger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
