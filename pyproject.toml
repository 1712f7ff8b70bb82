[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "sensorman"
version = "0.1.0"
description = "Client for a line-based home sensor server: routes messages, keeps chart data for readings and stores them in SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["sensor", "iot", "home-automation", "sqlite", "tcp", "client"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sensorman = "sensorman.app:main"

[tool.setuptools.packages.find]
include = ["sensorman*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
