[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "playkit"
version = "0.1.0"
description = "Small building blocks for 2D/3D geometry, collision detection, ray casting, particle effects, UI event plumbing and a tiny actor system"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "geometry",
    "collision",
    "raycasting",
    "actor",
    "particles",
    "binary-tree",
    "ui-events",
]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
playkit-actor = "playkit.actor:main"

[tool.hatch.build.targets.wheel]
packages = ["playkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
