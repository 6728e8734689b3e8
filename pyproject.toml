[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "posfixa"
version = "0.1.0"
description = "Convert and evaluate arithmetic expressions in infix and postfix notation, with sen, cos, tg and log"
requires-python = ">=3.10"
dependencies = []
keywords = ["postfix", "infix", "calculator", "reverse polish notation", "shunting-yard"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
posfixa = "posfixa.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["posfixa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
