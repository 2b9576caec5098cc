[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "academictodo"
version = "1.0.0"
description = "A small JSON-backed to-do store for academic work: tasks, exams, projects and reports."
requires-python = ">=3.10"
dependencies = []
keywords = ["todo", "tasks", "students", "planner", "json"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
academictodo = "academictodo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["academictodo"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
