[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jonoondb"
version = "0.1.0"
description = "Building blocks of a document database engine: vector column indexers, bitmaps, varints, object pools and storage helpers"
requires-python = ">=3.10"
keywords = ["database", "document-store", "index", "bitmap", "varint", "object-pool", "mmap"]
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
    "Topic :: Database :: Database Engines/Servers",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["jonoondb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
