[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weightgraph"
version = "0.1.0"
description = "Weighted graphs with BFS, DFS, Dijkstra, Kruskal and Prim, plus the small data structures behind them"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "dijkstra",
    "kruskal",
    "prim",
    "bfs",
    "dfs",
    "union-find",
    "priority-queue",
    "spanning-tree",
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
weightgraph-demo = "weightgraph.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["weightgraph"]

[tool.hatch.build.targets.sdist]
include = ["weightgraph", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["weightgraph"]
