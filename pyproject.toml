[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stackqueue"
version = "0.1.0"
description = "Classic stack, queue and breadth-first search puzzles as a small library and command-line tools"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "stack",
    "queue",
    "bfs",
    "priority-queue",
    "postfix",
    "josephus",
    "brackets",
    "algorithms",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stackqueue-sandcastle = "stackqueue.sandcastle:main"
stackqueue-josephus = "stackqueue.josephus:main"
stackqueue-maze = "stackqueue.maze:main"
stackqueue-rockcalc = "stackqueue.rockcalc:main"
stackqueue-counters = "stackqueue.counters:main"
stackqueue-postfix = "stackqueue.postfix:main"
stackqueue-brackets = "stackqueue.brackets:main"
stackqueue-balance = "stackqueue.balance:main"
stackqueue-rooftops = "stackqueue.rooftops:main"

[tool.hatch.build.targets.wheel]
packages = ["stackqueue"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
