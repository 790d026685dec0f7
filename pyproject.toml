[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "celroll"
version = "0.1.0"
description = "Game logic for a 3D rolling-ball platformer: matrices, quaternions, input, components, cameras, platforms and the player"
requires-python = ">=3.10"
keywords = ["game", "platformer", "3d", "camera", "quaternion", "transform", "game-loop"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["celroll"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
