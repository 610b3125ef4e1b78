[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "designkit"
version = "0.1.0"
description = "Object models for classic system-design exercises: elevator scheduling, library management and cinema seating."
requires-python = ">=3.10"
dependencies = []
keywords = ["system-design", "elevator", "scheduling", "library", "cinema", "simulation"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["designkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
