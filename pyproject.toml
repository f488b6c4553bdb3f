[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "basketbots"
version = "0.1.0"
description = "A top-down robot basketball simulation and a grid-world map viewer"
requires-python = ">=3.10"
keywords = ["simulation", "robots", "basketball", "projectile", "gridworld", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Education",
]
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
basketbots = "basketbots.view:main"
basketbots-grid = "basketbots.gridview:main"

[tool.hatch.build.targets.wheel]
packages = ["basketbots"]

[tool.pytest.ini_options]
addopts = "-ra"
