[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chunkrunner"
version = "1.0.0"
description = "A side-scrolling platformer on an endless, chunk-generated Perlin-noise world"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "platformer", "pygame", "perlin-noise", "procedural-generation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chunkrunner = "chunkrunner.game:main"

[tool.hatch.build.targets.wheel]
packages = ["chunkrunner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
