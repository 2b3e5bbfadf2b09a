[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atlasml"
version = "0.1.0"
description = "Small machine-learning toolkit: CSV data frames, logistic regression, decision and regression trees, and metrics"
requires-python = ">=3.10"
dependencies = []
keywords = ["machine-learning", "decision-tree", "logistic-regression", "regression-tree", "dataframe"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
atlasml = "atlasml.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["atlasml"]

[tool.pytest.ini_options]
addopts = "-ra"
