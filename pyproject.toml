[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pongsdl"
version = "0.1.0"
description = "A small pygame arcade sandbox: a paddle, sprite sheets, a running clock and a music jukebox."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "pong", "pygame", "sprites"]
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
pongsdl = "pongsdl.game:main"

[tool.hatch.build.targets.wheel]
packages = ["pongsdl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
