[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlekit"
version = "0.1.0"
description = "Small, dependency-free solutions to classic algorithm puzzles on numbers, arrays, strings and linked lists."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "puzzles", "dynamic-programming", "prefix-sums", "strings", "linked-list"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["puzzlekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
