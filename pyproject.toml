[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vonmann"
version = "0.1.0"
description = "A cycle-counting MOS 6502 processor emulator"
requires-python = ">=3.10"
dependencies = []
keywords = ["6502", "mos6502", "emulator", "cpu", "retro"]
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

[project.scripts]
vonmann = "vonmann.mos6502:main"

[tool.hatch.build.targets.wheel]
packages = ["vonmann"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
