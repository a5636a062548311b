[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "curvedeploy"
version = "0.1.0"
description = "Task running, tool-output parsing, config rewriting and terminal tables for Curve storage cluster deployment"
requires-python = ">=3.10"
keywords = [
    "curve",
    "deployment",
    "cluster",
    "containers",
    "iscsi",
    "fuse",
    "tables",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: System :: Distributed Computing",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["curvedeploy"]

[tool.hatch.build.targets.sdist]
include = [
    "curvedeploy",
    "tests",
]

[tool.pytest.ini_options]
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
