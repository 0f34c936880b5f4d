[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "wireframe"
version = "0.1.0"
description = "Parse height-map files and render them as wireframe grids into an in-memory image"
requires-python = ">=3.10"
dependencies = []
keywords = ["wireframe", "heightmap", "fdf", "raster", "line-drawing", "dda"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
wireframe = "wireframe.app:main"

[tool.setuptools.packages.find]
include = ["wireframe*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
