[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "slrgen"
version = "0.1.0"
description = "SLR(1) table builder and shift-reduce parser that turns a small while-language into quadruples"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "slr",
    "lr parser",
    "parser generator",
    "compiler",
    "intermediate code",
    "quadruples",
    "first follow",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
slrgen = "slrgen.cli:main"

[tool.setuptools.packages.find]
include = ["slrgen*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
