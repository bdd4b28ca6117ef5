[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adtlab"
version = "0.1.0"
description = "Cursor lists, BFS and DFS graphs, and the command-line tools built on them"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linked list",
    "cursor",
    "graph",
    "breadth-first search",
    "depth-first search",
    "shortest path",
    "strongly connected components",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adtlab-lex = "adtlab.lex:main"
adtlab-findpath = "adtlab.find_path:main"
adtlab-findcomponents = "adtlab.find_components:main"

[tool.hatch.build.targets.wheel]
packages = ["adtlab"]

[tool.hatch.build.targets.sdist]
include = ["adtlab", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
