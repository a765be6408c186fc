[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rfpulse"
version = "0.1.0"
description = "Decoders and encoders for 433 MHz RF pulse trains from weather sensors, alarms, doorbells, keyfobs and smoke detectors"
requires-python = ">=3.10"
dependencies = []
keywords = ["rf", "433mhz", "home-automation", "decoder", "pulses", "sensors", "doorbell"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rfpulse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
