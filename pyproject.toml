[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "multibar"
version = "0.1.0"
description = "Building blocks for terminal progress bars: fillers, bar state, bar and container options, and a cursor-rewinding console writer."
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["progress", "progress-bar", "terminal", "console", "spinner"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["multibar"]

[tool.hatch.build.targets.sdist]
include = ["multibar", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
