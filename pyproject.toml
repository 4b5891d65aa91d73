[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "multiorder"
version = "0.1.0"
description = "A list-backed container that can be traversed in six different orders."
requires-python = ">=3.10"
dependencies = []
keywords = ["container", "iteration", "ordering", "traversal", "middle-out", "zigzag"]
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
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
multiorder-demo = "multiorder.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["multiorder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
