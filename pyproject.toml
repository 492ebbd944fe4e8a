[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazemouse"
version = "1.0.0"
description = "Micromouse maze solvers that talk to a maze simulator over standard input and output"
requires-python = ">=3.10"
dependencies = []
keywords = ["micromouse", "maze", "solver", "robot", "depth-first search", "simulator"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mazemouse-greedy = "mazemouse.greedy:main"
mazemouse-dfs = "mazemouse.dfs:main"

[tool.hatch.build.targets.wheel]
packages = ["mazemouse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
