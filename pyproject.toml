[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mongosqlgen"
version = "0.1.0"
description = "Generate MongoDB shell queries from simple SQL statements"
requires-python = ">=3.10"
dependencies = []
keywords = ["sql", "mongodb", "query", "generator", "converter"]
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
    "Topic :: Database",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mongosqlgen = "mongosqlgen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mongosqlgen"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
