[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "avlstocks"
version = "0.1.0"
description = "A self-balancing AVL tree with a small interactive stock lookup tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "tree", "binary search tree", "stocks", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
test = ["pytest"]

[project.scripts]
avlstocks = "avlstocks.cli:main"

[tool.setuptools.packages.find]
include = ["avlstocks*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
