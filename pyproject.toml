[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sceneview"
version = "1.0.0"
description = "A small scene graph for a model viewer, with transform, mesh and light entities and WASD keyboard controllers"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "viewer", "scene graph", "mesh", "wasd", "entity", "transform"]
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
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sceneview = "sceneview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sceneview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
