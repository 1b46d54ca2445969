[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "biasclassifier"
version = "0.1.0"
description = "Single-threshold classifiers trained by nudging a bias over synthetic fruit and bitmap samples"
requires-python = ">=3.10"
dependencies = []
keywords = ["classifier", "threshold", "bias", "bitmap", "synthetic-data"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
biasclassifier = "biasclassifier.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["biasclassifier"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
