[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyplat"
version = "0.1.0"
description = "Game logic for a small side-scrolling platformer: sprites, frame animations, swept-AABB collision, a player, enemies and a demo level, rendered as inspectable draw commands."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game",
    "platformer",
    "collision",
    "swept-aabb",
    "sprites",
    "animation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tinyplat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
