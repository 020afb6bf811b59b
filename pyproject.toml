[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshkit"
version = "0.1.0"
description = "Core pieces of a small static-mesh editor: geometry, ray picking, splitter layout, timing, string serialization and device state"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "mesh", "bounding-box", "ray-casting", "editor", "layout", "serialization"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["meshkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
