[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zosromdisk"
version = "0.1.0"
description = "Build and inspect Zeal 8-bit OS romdisk images, with Python models of the OS user-space interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["zeal8bit", "romdisk", "z80", "image", "packer", "retrocomputing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Packaging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zos-pack = "zosromdisk.packer:main"

[tool.hatch.build.targets.wheel]
packages = ["zosromdisk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
