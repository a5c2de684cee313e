[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lrukit"
version = "0.1.0"
description = "Thread-safe least-recently-used caches with demos and a concurrency comparison"
requires-python = ">=3.10"
dependencies = []
keywords = ["lru", "cache", "thread-safe", "eviction"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lrukit-demo = "lrukit.demo:main"
lrukit-comparison = "lrukit.comparison:main"
lrukit-concurrent-demo = "lrukit.concurrent_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["lrukit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
