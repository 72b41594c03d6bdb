[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "anoptic"
version = "0.1.0"
description = "Game engine runtime utilities: timing, buffered logging, frame timing and a glTF asset loader."
requires-python = ">=3.10"
keywords = ["game-engine", "gltf", "logging", "timing", "3d"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Software Development :: Libraries",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["anoptic"]

[tool.pytest.ini_options]
addopts = "-ra"
