[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "workoutapi"
version = "0.1.0"
description = "A small WSGI JSON service for recording workouts and their exercise entries in SQLite"
requires-python = ">=3.10"
dependencies = [
    "werkzeug",
]
keywords = ["workouts", "fitness", "wsgi", "json", "rest", "api", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
workoutapi = "workoutapi.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["workoutapi"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
