[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadsim"
version = "0.1.0"
description = "Headless game models: tile-based platformer physics, particle emitter configuration and small arcade game logic"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "particles", "platformer", "physics", "snake", "asteroids", "arkanoid"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quadsim"]

[tool.pytest.ini_options]
addopts = "-ra"
