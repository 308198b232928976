[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "padmapper"
version = "0.1.0"
description = "Map gamepad HID reports onto a simulated virtual Xbox 360 controller using rule-based profiles"
requires-python = ">=3.10"
dependencies = []
keywords = ["gamepad", "controller", "input mapping", "remapping", "profiles", "hid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
padmapper = "padmapper.service:main"

[tool.hatch.build.targets.wheel]
packages = ["padmapper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
