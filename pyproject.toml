[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "listfn"
version = "0.1.0"
description = "Interactive interpreter for defining lists of natural numbers, composing list functions and searching for compositions"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "list functions", "composition", "breadth-first search"]
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
listfn = "listfn.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["listfn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
