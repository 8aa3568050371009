[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "compilerlab"
version = "0.1.0"
description = "Small compiler-construction exercises: pattern recognisers, DFAs, a lexer, a recursive-descent recogniser and FIRST/FOLLOW sets"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "parser", "dfa", "grammar", "first-follow"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
compilerlab-patterns = "compilerlab.patterns:main"
compilerlab-dfa = "compilerlab.dfa:main"
compilerlab-lexer = "compilerlab.lexer:main"
compilerlab-rdp = "compilerlab.rdp:main"
compilerlab-first-follow = "compilerlab.first_follow:main"

[tool.hatch.build.targets.wheel]
packages = ["compilerlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
