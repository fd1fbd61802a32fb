[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lynxcore"
version = "0.1.0"
description = "Building blocks for an Atari Lynx emulator: 65C02 operations, system RAM, band-limited sound buffers, bit helpers and core options"
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "atari", "lynx", "65c02", "6502", "blip-buffer"]
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
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lynxcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
