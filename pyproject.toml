[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "opossum"
version = "0.1.0"
description = "A small in-memory column store with chunked tables, dictionary encoding and scan operators"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "column-store", "in-memory", "dictionary-encoding", "query-operators"]
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
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["opossum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
