[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "embedkit"
version = "0.1.0"
description = "Embedded-systems building blocks: ring buffers, memory pools, state machines, blocking queues, event dispatch and simulated timers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "embedded",
    "ring-buffer",
    "memory-pool",
    "state-machine",
    "producer-consumer",
    "events",
    "timers",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
embedkit-producer-consumer = "embedkit.blocking_queue:main"
embedkit-aligned = "embedkit.aligned:main"

[tool.hatch.build.targets.wheel]
packages = ["embedkit"]

[tool.hatch.build.targets.sdist]
include = ["embedkit", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
