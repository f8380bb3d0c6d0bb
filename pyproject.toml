[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jetmap"
version = "0.1.0"
description = "Map, model and texture loading plus scene logic for a small third-person street game"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["game", "bmap", "wavefront", "obj", "mtl", "map", "assets"]
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
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
jetmap = "jetmap.game:main"

[tool.hatch.build.targets.wheel]
packages = ["jetmap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
