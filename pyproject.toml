[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heltespil"
version = "1.0.0"
description = "A text-based role-playing game where heroes fight enemies, explore caves and buy weapons, with progress kept in SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "text-adventure", "sqlite", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Danish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
heltespil = "heltespil.game:main"

[tool.hatch.build.targets.wheel]
packages = ["heltespil"]

[tool.pytest.ini_options]
addopts = "-ra"
