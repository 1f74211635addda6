[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paintkit"
version = "0.1.1"
description = "Lanczos image resizing, script effect settings and shortcut capture for a raster paint program"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["image", "resize", "lanczos", "resampling", "paint", "shortcut"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["paintkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
