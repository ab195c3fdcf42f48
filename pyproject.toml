[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "thevenin-finder"
version = "1.0.0"
description = "Interactive Thevenin equivalent circuit finder with load power analysis"
requires-python = ">=3.10"
dependencies = []
keywords = ["thevenin", "circuit", "resistor", "electrical engineering", "maximum power transfer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
thevenin-finder = "thevenin_finder.cli:main"

[tool.setuptools.packages.find]
include = ["thevenin_finder*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
