[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coldatoms"
version = "0.1.0"
description = "Building blocks for simulating clouds of cold atoms: integration, gravity, collisions, atom sources and dipole forces"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["cold atoms", "atomic physics", "simulation", "dipole trap", "monte carlo", "collisions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["coldatoms"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
