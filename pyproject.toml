[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kyopro"
version = "0.1.0"
description = "Algorithms and data structures for competitive programming: segment trees, prefix sums, binary search, graph algorithms and tree queries."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "competitive-programming",
    "algorithms",
    "data-structures",
    "segment-tree",
    "graph",
    "shortest-path",
    "euler-tour",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
packages = ["kyopro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
