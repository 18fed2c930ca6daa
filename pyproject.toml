[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "searchtrees"
version = "0.1.0"
description = "Binary search, a binary search tree and a sequential symbol table, with a word-frequency tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search", "binary search tree", "symbol table", "data structures", "word frequency"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
searchtrees-bench = "searchtrees.binary_search:main"
searchtrees-wordcount = "searchtrees.word_count:main"

[tool.setuptools.packages.find]
include = ["searchtrees*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
