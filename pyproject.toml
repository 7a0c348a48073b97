[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "umarace"
version = "0.1.0"
description = "A terminal racing game with betting and skills, plus a few small console games"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "racing", "betting", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Korean",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
umarace = "umarace.lobby:main"
umarace-baseball = "umarace.baseball:main"
umarace-rps = "umarace.rps:main"
umarace-goblin = "umarace.goblin:main"
umarace-calculator = "umarace.calculator:main"

[tool.hatch.build.targets.wheel]
packages = ["umarace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
