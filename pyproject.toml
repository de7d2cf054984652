[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qorcore"
version = "0.1.0"
description = "Core building blocks: structured error codes, Fx and FNV-1a hashers, ids and name tags, type tags and half-precision floats, JSON configuration, a component life cycle and tracked process memory."
requires-python = ">=3.10"
dependencies = []
keywords = ["hashing", "fnv1a", "fxhash", "tags", "type-tags", "half-precision", "bfloat16", "configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qorcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
