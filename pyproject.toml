[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numanalysis"
version = "0.1.0"
description = "Classic numerical analysis routines: RK4 integration, polynomial interpolation and nonlinear root finding"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-analysis",
    "interpolation",
    "lagrange",
    "newton",
    "hermite",
    "runge-kutta",
    "integration",
    "root-finding",
    "bisection",
    "secant",
    "fixed-point",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numanalysis-demo = "numanalysis.integrator:main"

[tool.hatch.build.targets.wheel]
packages = ["numanalysis"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
