[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sonarsweep"
version = "1.0.0"
description = "Solvers for the first twelve puzzles of a 2021 programming advent calendar"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solver", "bingo", "graph", "grid"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
test = ["pytest"]

[project.scripts]
sonarsweep-day01 = "sonarsweep.day01:main"
sonarsweep-day02 = "sonarsweep.day02:main"
sonarsweep-day03 = "sonarsweep.day03:main"
sonarsweep-day04 = "sonarsweep.day04:main"
sonarsweep-day05 = "sonarsweep.day05:main"
sonarsweep-day06 = "sonarsweep.day06:main"
sonarsweep-day07 = "sonarsweep.day07:main"
sonarsweep-day08 = "sonarsweep.day08:main"
sonarsweep-day09 = "sonarsweep.day09:main"
sonarsweep-day10 = "sonarsweep.day10:main"
sonarsweep-day11 = "sonarsweep.day11:main"
sonarsweep-day12 = "sonarsweep.day12:main"

[tool.hatch.build.targets.wheel]
packages = ["sonarsweep"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
