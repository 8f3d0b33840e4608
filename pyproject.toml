[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sudautil"
version = "0.1.0"
description = "Copy-on-write little-endian integer arrays and the 64-bit Fx hash for binary dictionary handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["dictionary", "copy-on-write", "fxhash", "hash", "binary"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["sudautil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
