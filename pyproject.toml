[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bestcombo"
version = "0.1.0"
description = "Find low-cost combinations of streaming packages that cover a set of games"
requires-python = ">=3.10"
dependencies = []
keywords = ["set cover", "optimisation", "streaming packages", "backtracking", "greedy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bestcombo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
