[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "axiom_shift"
version = "0.1.0"
description = "A matrix-battle puzzle game: shape your matrix against a seeded rule and outgrow the enemy."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "puzzle", "matrix", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
axiom-shift = "axiom_shift.game:main"

[tool.hatch.build.targets.wheel]
packages = ["axiom_shift"]

[tool.pytest.ini_options]
addopts = "-ra"
