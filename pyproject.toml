[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "infratest"
version = "0.1.0"
description = "Helpers for automated tests of infrastructure: lists, errors, environment variables, files, docker-compose and AWS resources."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "testing",
    "infrastructure",
    "terraform",
    "terragrunt",
    "aws",
    "docker-compose",
    "integration-tests",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["infratest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
