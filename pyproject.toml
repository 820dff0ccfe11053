[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsdemo"
version = "0.1.0"
description = "Interactive command-line tour of classic data structures: arrays, linked lists, stacks, queues, hash tables and binary search trees."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "education",
    "linked list",
    "stack",
    "queue",
    "hash table",
    "binary search tree",
    "sorting",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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

[project.scripts]
dsdemo = "dsdemo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dsdemo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
