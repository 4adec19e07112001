[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minicompiler"
version = "0.1.0"
description = "A small teaching compiler back end: AST, symbol table, three-address code with optimisation, and MIPS assembly output."
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "mips", "three-address code", "education", "ast", "symbol table"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minicompiler"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
