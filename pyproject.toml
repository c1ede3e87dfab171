[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uniengine"
version = "0.1.0"
description = "A small entity-component-system core with sparse sets, a fixed-size chunk pool and frame timing"
requires-python = ">=3.10"
dependencies = []
keywords = ["ecs", "entity-component-system", "game-engine", "sparse-set", "memory-pool"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
uniengine-demo = "uniengine.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["uniengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
