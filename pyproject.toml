[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "octonn"
version = "0.1.0"
description = "A small fully connected feed-forward neural network with sigmoid activations and back-propagation"
requires-python = ">=3.10"
dependencies = []
keywords = ["neural network", "backpropagation", "mnist", "machine learning", "sigmoid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
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

[project.scripts]
octonn = "octonn.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["octonn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
