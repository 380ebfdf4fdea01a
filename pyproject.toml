[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numkit"
version = "0.1.0"
description = "Classic numerical methods in single precision: machine parameters, series errors, Bessel functions, root finding, linear systems, random deviates, Jacobi eigenvalues and affine fitting"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = [
    "numerical-methods",
    "machine-epsilon",
    "root-finding",
    "bessel",
    "linear-algebra",
    "svd",
    "random-numbers",
    "eigenvalues",
    "least-squares",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numkit = "numkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
