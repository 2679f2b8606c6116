[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goapkit"
version = "0.6.0"
description = "Goal-oriented action planning over plain data: states, goals, actions and an A* planner"
requires-python = ">=3.10"
dependencies = []
keywords = ["goap", "ai", "planning", "a-star", "game-ai"]
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
goapkit-demo = "goapkit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["goapkit"]

[tool.hatch.build.targets.sdist]
include = ["goapkit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
