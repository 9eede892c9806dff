[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dpkit"
version = "0.1.0"
description = "Dynamic-programming solvers and modular arithmetic helpers for counting and optimisation problems"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dynamic programming",
    "combinatorics",
    "modular arithmetic",
    "digit dp",
    "bitmask dp",
    "segment tree",
    "knapsack",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dpkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
