[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hospsim"
version = "0.1.0"
description = "Cycle-based simulation of a hospital ward: priority waiting deque, beds and discharge history."
requires-python = ">=3.10"
dependencies = []
keywords = ["hospital", "simulation", "priority queue", "deque", "beds"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hospsim = "hospsim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["hospsim"]

[tool.pytest.ini_options]
addopts = "-ra"
