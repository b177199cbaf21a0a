[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "melo"
version = "0.1.0"
description = "Emulator for the Melo fantasy console's 8-bit CPU"
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "fantasy-console", "cpu", "8-bit"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
melo = "melo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["melo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
