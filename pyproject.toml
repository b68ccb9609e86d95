[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cfkit"
version = "0.1.0"
description = "Solutions to classic beginner competitive-programming problems, as a library and a command-line tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "exercises", "puzzles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
cfkit = "cfkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cfkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
