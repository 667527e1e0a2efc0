[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consoleplay"
version = "0.1.0"
description = "Small console games and exercises: rock-paper-scissors, a math quiz, an ATM simulator, a stack and a growable vector."
requires-python = ">=3.10"
dependencies = []
keywords = ["console", "games", "quiz", "rock-paper-scissors", "atm", "data-structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
consoleplay-stack = "consoleplay.stack:main"
consoleplay-vector = "consoleplay.vector:main"
consoleplay-rps = "consoleplay.rps:main"
consoleplay-mathgame = "consoleplay.mathgame:main"
consoleplay-atm = "consoleplay.atm:main"

[tool.hatch.build.targets.wheel]
packages = ["consoleplay"]

[tool.pytest.ini_options]
addopts = "-ra"
