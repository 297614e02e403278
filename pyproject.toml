[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small, working examples of classic object-oriented design patterns: builders, factories, adapters, decorators, chains, commands, observers and more."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
    "redis",
]
keywords = [
    "design-patterns",
    "builder",
    "prototype",
    "factory",
    "adapter",
    "decorator",
    "facade",
    "iterator",
    "mediator",
    "observer",
    "proxy",
    "visitor",
    "chain-of-responsibility",
    "command",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
patternkit-leave = "patternkit.chain:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.hatch.build.targets.sdist]
include = [
    "patternkit",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
