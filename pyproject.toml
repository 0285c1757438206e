[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dskit"
version = "0.1.0"
description = "Classic data structures and algorithms: linked lists, stacks, queues, graph traversal, shortest paths, spanning trees, expression conversion, digit arithmetic and polynomials."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "linked list",
    "doubly linked list",
    "stack",
    "queue",
    "graph",
    "bfs",
    "dfs",
    "dijkstra",
    "kruskal",
    "prim",
    "polynomial",
    "infix",
    "postfix",
    "prefix",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dskit"]

[tool.pytest.ini_options]
addopts = "-ra"
