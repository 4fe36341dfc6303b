[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heifbox"
version = "0.1.0"
description = "Box types of the ISO base media file format used by HEIF/HEIC images"
requires-python = ">=3.10"
dependencies = []
keywords = ["isobmff", "heif", "heic", "boxes", "hevc", "hvcc"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["heifbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
