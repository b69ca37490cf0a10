[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cstringkit"
version = "0.1.0"
description = "C string.h-style helpers, printf-style formatting and scanf-style parsing for Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "sprintf", "sscanf", "strtok", "strerror", "memory"]
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
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cstringkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
