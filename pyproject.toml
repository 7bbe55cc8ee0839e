[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "sphjet"
version = "0.1.0"
description = "Moving-mesh spherical hydrodynamics building blocks for relativistic jet, wind and explosion simulations"
requires-python = ">=3.10"
dependencies = []
keywords = ["hydrodynamics", "moving mesh", "astrophysics", "jets", "supernova", "simulation"]
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
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["sphjet*"]

[tool.pytest.ini_options]
addopts = "-ra"
