[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskservice"
version = "0.1.0"
description = "A small HTTP service for managing tasks, with a JSON API, SQLite storage and a command-line launcher."
requires-python = ">=3.11"
dependencies = [
    "flask",
]
keywords = ["tasks", "todo", "rest", "json", "http", "flask", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
taskservice = "taskservice.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["taskservice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
