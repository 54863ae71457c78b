[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridsearch"
version = "0.1.0"
description = "Grid pathfinding, backtracking puzzles and small recursive and combinatorial routines"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "a-star",
    "pathfinding",
    "backtracking",
    "n-queens",
    "magnets",
    "maze",
    "battleship",
    "combinatorics",
    "recursion",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gridsearch = "gridsearch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gridsearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
