[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pqcodec"
version = "0.1.0"
description = "Pure-Python encoders and decoders for the value and level encodings used in Parquet data pages"
requires-python = ">=3.10"
dependencies = []
keywords = ["parquet", "encoding", "rle", "bitpacking", "delta", "leb128", "columnar"]
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
    "Topic :: File Formats",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pqcodec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
