[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raycaster2d"
version = "0.1.0"
description = "A grid ray casting demo with a top-down map and a pseudo-3D first-person view, built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["raycasting", "pygame", "game", "dda", "pseudo-3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
raycaster2d = "raycaster2d.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["raycaster2d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
