[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jobsearch_kit"
version = "0.1.0"
description = "Building blocks for a job-vacancy search service: circuit breaker, sharded TTL cache, FIFO queue, rate limiter, formatting helpers and parser health tracking."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "circuit-breaker",
    "cache",
    "rate-limiter",
    "queue",
    "health-check",
    "job-search",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jobsearch_kit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
