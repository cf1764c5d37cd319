[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paxkit"
version = "0.1.0"
description = "Small utilities: chained comparisons, min/max tracking, sequence views, newline-aware text helpers and a lazily sorted container."
requires-python = ">=3.10"
dependencies = []
keywords = ["comparison", "sequences", "text", "newline", "luhn", "sorted"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["paxkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
