[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "complab"
version = "0.1.0"
description = "Small compiler-construction tools: lexing, parsing, FIRST/FOLLOW sets, automata conversion and code generation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "compiler",
    "lexer",
    "parser",
    "shift-reduce",
    "recursive-descent",
    "first-follow",
    "nfa",
    "dfa",
    "epsilon-closure",
    "three-address-code",
    "constant-propagation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
complab-lex = "complab.lexer:main"
complab-codegen = "complab.codegen:main"
complab-constprop = "complab.constprop:main"
complab-infix = "complab.infix:main"
complab-recdesc = "complab.recdesc:main"
complab-shiftreduce = "complab.shiftreduce:main"
complab-firstfollow = "complab.firstfollow:main"
complab-closure = "complab.closure:main"
complab-enfa = "complab.enfa:main"
complab-subset = "complab.subset:main"

[tool.hatch.build.targets.wheel]
packages = ["complab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["complab"]
