[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schmackle"
version = "0.1.0"
description = "Paint a coloured terminal backdrop with an ASCII-art image and large banner text"
requires-python = ">=3.10"
keywords = ["ascii-art", "terminal", "banner", "ansi", "image"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
schmackle = "schmackle.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["schmackle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
