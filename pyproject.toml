[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "srcm"
version = "0.1.0"
description = "Library for booking and managing medical appointments, with users, calendars, history and configuration files."
requires-python = ">=3.10"
dependencies = []
keywords = ["appointments", "scheduling", "clinic", "calendar"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Healthcare Industry",
    "Natural Language :: Spanish",
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

[tool.hatch.build.targets.wheel]
packages = ["srcm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
