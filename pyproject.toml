[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lifehash"
version = "1.0.0"
description = "Visual hashes of data drawn from Conway's Game of Life"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash", "visual-hash", "identicon", "game-of-life", "sha256"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lifehash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
