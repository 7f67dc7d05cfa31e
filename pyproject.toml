[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "autoheuristic"
version = "0.1.0"
description = "Explore entropy sample data with histograms, mask and convert sample files, and run entropy assessments on selected ranges."
requires-python = ">=3.10"
keywords = ["entropy", "histogram", "bitmask", "binary conversion", "min-entropy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
autoheuristic = "autoheuristic.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["autoheuristic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
