[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pacgame"
version = "0.1.0"
description = "A maze-chasing arcade game with dots, fruit power-ups and roaming ghosts"
requires-python = ">=3.10"
keywords = ["game", "arcade", "maze", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pacgame = "pacgame.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pacgame"]

[tool.pytest.ini_options]
addopts = "-ra"
