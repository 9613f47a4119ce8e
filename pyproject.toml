[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tankfield"
version = "0.1.0"
description = "A two-player top-down tank shooter on an 800x600 field"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "tanks", "arcade", "two-player", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tankfield = "tankfield.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tankfield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
