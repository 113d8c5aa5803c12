[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecsgame"
version = "0.1.0"
description = "A small entity-component-system game framework with a top-down arcade shooter"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "ecs", "entity-component-system", "shooter", "arcade", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ecsgame-shooter = "ecsgame.shooter_app:main"

[tool.hatch.build.targets.wheel]
packages = ["ecsgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
