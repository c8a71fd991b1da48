[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lunalite"
version = "0.1.0"
description = "Core building blocks of a small game engine: events, layers, input, logging, projects and assets"
requires-python = ">=3.10"
keywords = ["game-engine", "assets", "events", "layers", "obj", "project"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["lunalite"]

[tool.pytest.ini_options]
addopts = "-ra"
