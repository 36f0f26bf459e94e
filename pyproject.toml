[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "psalgos"
version = "0.1.0"
description = "Solutions to classic algorithm problems: backtracking, dynamic programming, data structures, greedy, two pointers and graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "dynamic-programming", "greedy", "graphs", "backtracking", "data-structures"]
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
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["psalgos"]

[tool.pytest.ini_options]
addopts = "-ra"
