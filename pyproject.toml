[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oiview"
version = "0.1.0"
description = "Interaction and presentation logic for an image viewer: selection rectangles, auto scroll, multi-click detection, image processing chains and info text formatting"
requires-python = ">=3.10"
dependencies = []
keywords = ["image", "viewer", "selection", "scrolling", "texel", "formatting"]
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
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oiview"]

[tool.pytest.ini_options]
addopts = "-ra"
