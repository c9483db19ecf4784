[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "motionkit"
version = "0.1.0"
description = "Planar motion planning toolkit: workspaces, link manipulators, grid C-spaces, A* graph search, collision checks and multi-agent helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "motion planning",
    "robotics",
    "a-star",
    "configuration space",
    "wavefront",
    "link manipulator",
    "multi-agent",
    "collision detection",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["motionkit"]

[tool.pytest.ini_options]
addopts = "-ra"
