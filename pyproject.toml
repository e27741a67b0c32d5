[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "decimizer"
version = "0.0.3"
description = "Small multi-criteria decision making: rescale variables and pick the best alternative."
requires-python = ">=3.10"
dependencies = []
keywords = ["decision making", "multi-criteria", "optimization", "rescaling", "l2 norm"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["decimizer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
