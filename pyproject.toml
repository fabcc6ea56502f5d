[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "handytools"
version = "2.0.0"
description = "Small everyday helpers for lists, dicts, sets, files, numbers and background futures"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "functional", "sets", "futures", "helpers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["handytools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
