[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coolingecu"
version = "0.1.0"
description = "Simulated engine cooling ECU: sensors, control logic, diagnostics and a CAN communication stack"
requires-python = ">=3.10"
dependencies = []
keywords = ["ecu", "engine", "cooling", "simulation", "can", "embedded", "diagnostics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coolingecu = "coolingecu.ecu:main"

[tool.hatch.build.targets.wheel]
packages = ["coolingecu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
