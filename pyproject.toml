[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysforge"
version = "0.1.0"
description = "Small systems building blocks: a cooperative executor, allocators, an LRU cache, bounded queues and an in-memory table store"
requires-python = ">=3.10"
dependencies = []
keywords = ["executor", "coroutine", "allocator", "arena", "pool", "lru", "cache", "ttl", "queue", "database", "in-memory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sysforge-demo = "sysforge.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["sysforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
