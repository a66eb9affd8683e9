[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitmapshooter"
version = "0.1.0"
description = "A small top-down arcade shooter drawn with procedurally built bitmaps"
requires-python = ">=3.10"
keywords = ["game", "arcade", "shooter", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bitmapshooter = "bitmapshooter.game:main"

[tool.hatch.build.targets.wheel]
packages = ["bitmapshooter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
