[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modelhelper"
version = "0.1.0"
description = "Command-line helper and library for building code-template models from database entities, projects and commit histories"
requires-python = ">=3.10"
keywords = ["code generation", "templates", "database", "cli", "changelog", "yaml"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]
dependencies = [
    "pyyaml",
    "tabulate",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mh = "modelhelper.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["modelhelper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
