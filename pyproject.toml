[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studymatch"
version = "0.1.0"
description = "Match students into study partners by shared courses and study preferences."
requires-python = ">=3.10"
dependencies = []
keywords = ["study", "matching", "students", "education", "graph"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
studymatch = "studymatch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["studymatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
