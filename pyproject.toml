[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vulkml"
version = "0.1.0"
description = "Small n-dimensional tensor library with typed storage, slicing and text rendering"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["tensor", "machine-learning", "ndarray", "numpy"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vulkml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
