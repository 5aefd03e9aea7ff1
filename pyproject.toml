[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonui"
version = "1.0.0"
description = "User interface layer for a dungeon role-playing game: menus, HUD, map view, battle, equipment and level-up panels on pygame"
requires-python = ">=3.10"
keywords = ["game", "rpg", "dungeon", "pygame", "ui", "hud"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dungeonui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
