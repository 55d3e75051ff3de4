[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "categorica"
version = "0.1.0"
description = "Categories, functors, monads and executable checks of their laws, with finite sets as a worked example"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "category theory",
    "functor",
    "monad",
    "monoidal category",
    "finite sets",
    "law verification",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
categorica = "categorica.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["categorica"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
