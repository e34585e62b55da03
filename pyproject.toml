[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algods"
version = "0.1.0"
description = "Classic data structures (stacks, queues, trees, disjoint sets) and sorting algorithms."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "stack",
    "queue",
    "tree",
    "disjoint set",
    "sorting",
    "quick sort",
    "bubble sort",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algods-bubble-sort = "algods.bubble_sort:main"
algods-quick-sort = "algods.quick_sort:main"

[tool.hatch.build.targets.wheel]
packages = ["algods"]

[tool.pytest.ini_options]
addopts = "-ra"
