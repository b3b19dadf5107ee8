[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bana"
version = "0.1.0"
description = "Small fixed-capacity containers, an arena, a byte buffer reader and file helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["arena", "containers", "bucket array", "hash map", "buffer reader", "free list"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bana"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
