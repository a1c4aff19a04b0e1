[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algobattle"
version = "0.1.0"
description = "Pit Passo-playing agents against each other or against a human, each agent on its own clock."
requires-python = ">=3.10"
keywords = ["passo", "board game", "game ai", "agents", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
algobattle = "algobattle.app:main"

[tool.hatch.build.targets.wheel]
packages = ["algobattle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
