[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "funcsteps"
version = "0.1.0"
description = "Small functional-programming building blocks: accumulators, guarded recursion, factorials and a fixed-point combinator"
requires-python = ">=3.10"
dependencies = []
keywords = ["functional", "closures", "recursion", "factorial", "y-combinator", "memoization"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
funcsteps-add = "funcsteps.arith:main"
funcsteps-accumulate = "funcsteps.accumulator:main"
funcsteps-recurse = "funcsteps.recursion:main"
funcsteps-factorial = "funcsteps.factorial:main"
funcsteps-combinator = "funcsteps.combinator:main"

[tool.hatch.build.targets.wheel]
packages = ["funcsteps"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
