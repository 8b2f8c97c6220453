[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lookpath"
version = "0.1.0"
description = "Search the directories in $PATH for file names that match a pattern"
requires-python = ">=3.10"
dependencies = []
keywords = ["path", "search", "executables", "command-line", "which"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lookpath = "lookpath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lookpath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
