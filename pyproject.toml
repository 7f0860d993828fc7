[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftcore"
version = "0.1.0"
description = "Small C-style character, string, memory, list, formatting and line-reading utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "strings", "memory", "linked-list", "get-next-line", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
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
packages = ["ftcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
