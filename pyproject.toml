[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ardrivo"
version = "0.1.0"
description = "Arduino-style runtime APIs (String, Print, Stream, SD, MQTT) for simulated sketches"
requires-python = ">=3.10"
keywords = ["arduino", "emulator", "simulation", "mqtt", "sd-card", "sketch"]
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
    "Topic :: Software Development :: Embedded Systems",
]
dependencies = [
    "paho-mqtt",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ardrivo"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
