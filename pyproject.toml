[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "automatonlab"
version = "0.1.0"
description = "Define deterministic and epsilon-nondeterministic finite automata from a transition table and check input strings against them."
requires-python = ">=3.10"
dependencies = []
keywords = ["automaton", "dfa", "nfa", "epsilon-nfa", "state machine", "formal languages"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
automatonlab = "automatonlab.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["automatonlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
