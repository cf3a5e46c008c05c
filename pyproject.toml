[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "perftchess"
version = "0.1.0"
description = "A small chess move generator that counts perft nodes from a FEN position"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "perft", "fen", "move-generation", "board-games"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
perftchess = "perftchess.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["perftchess"]

[tool.hatch.build.targets.sdist]
include = ["perftchess", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
