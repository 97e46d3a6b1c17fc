[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "insound"
version = "0.1.0"
description = "Building blocks for the Insound web service: HTTP status codes, FSB bank builder constants, MongoDB object ids and small helpers."
requires-python = ">=3.10"
dependencies = [
    "pymongo",
]
keywords = ["http", "status", "mongodb", "objectid", "fsbank", "audio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["insound"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
