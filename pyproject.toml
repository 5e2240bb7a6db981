[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sevens"
version = "0.1.0"
description = "Simulator for the Sevens card game with pluggable player strategies"
requires-python = ">=3.10"
dependencies = []
keywords = ["sevens", "card game", "fan tan", "simulation", "strategy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sevens = "sevens.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sevens"]

[tool.pytest.ini_options]
addopts = "-ra"
