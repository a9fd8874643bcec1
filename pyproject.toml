[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nacoskit"
version = "0.1.0"
description = "Building blocks for Nacos naming and configuration clients: settings, models, HTTP agent, request signing, logging and UUIDs"
requires-python = ">=3.10"
keywords = ["nacos", "service-discovery", "configuration", "naming", "uuid", "http"]
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
    "Topic :: System :: Distributed Computing",
]
dependencies = [
    "requests>=2.25",
    "psutil>=5.8",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "responses>=0.23",
]

[tool.hatch.build.targets.wheel]
packages = ["nacoskit"]

[tool.hatch.build.targets.sdist]
include = ["nacoskit", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
