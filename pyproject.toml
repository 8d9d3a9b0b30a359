[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "trickball"
version = "0.1.0"
description = "A two-dimensional bouncing ball model with Regula Falsi event detection and RK2 propagation"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "regula-falsi", "dynamics", "runge-kutta", "events"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["trickball*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
