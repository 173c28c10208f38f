[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "engine3d"
version = "0.1.0"
description = "A small software 3D engine that rotates, projects and draws triangle meshes with pygame"
requires-python = ">=3.10"
keywords = ["3d", "rendering", "projection", "rotation", "mesh", "pygame"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
engine3d = "engine3d.render:main"

[tool.hatch.build.targets.wheel]
packages = ["engine3d"]

[tool.pytest.ini_options]
addopts = "-ra"
