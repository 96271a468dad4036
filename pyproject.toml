[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matrixcode"
version = "0.1.0"
description = "Data Matrix building blocks: symbol size tables, GF(256) Reed-Solomon coding, 2D geometry and scan-grid traversal"
requires-python = ">=3.10"
dependencies = []
keywords = ["data matrix", "barcode", "2d barcode", "reed-solomon", "ecc200"]
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
    "Topic :: Scientific/Engineering :: Image Recognition",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["matrixcode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
