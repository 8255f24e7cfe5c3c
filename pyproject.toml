[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "langcheck"
version = "0.1.0"
description = "Recognisers for small regular and context-free languages over {a, b} and {0, 1}"
requires-python = ">=3.10"
dependencies = []
keywords = ["automata", "dfa", "nfa", "formal-languages", "grammar", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
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

[project.scripts]
langcheck = "langcheck.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["langcheck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
