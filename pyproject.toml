[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fanalgo"
version = "0.1.0"
description = "Classic algorithms and data structures: sorts, stacks, queues, a priority queue and union-find"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "union-find",
    "priority-queue",
    "stack",
    "queue",
    "percolation",
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
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["fanalgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
