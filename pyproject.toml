[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algosolve"
version = "0.1.0"
description = "Solutions to classic algorithm exercises as plain functions: grid searches, graph traversal, searching, heaps, dynamic programming and greedy methods."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "breadth-first-search",
    "binary-search",
    "dynamic-programming",
    "greedy",
    "exercises",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algosolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
