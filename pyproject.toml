[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plotartist"
version = "0.1.0"
description = "Plot artists that turn data into paths, markers and colour meshes for a renderer you supply"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["plotting", "visualization", "artist", "path", "marker", "chart"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["plotartist"]

[tool.pytest.ini_options]
addopts = "-ra"
