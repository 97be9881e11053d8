[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "serialros"
version = "0.1.0"
description = "Message serialization, time arithmetic and serial framing for a lightweight ROS serial protocol"
requires-python = ">=3.10"
dependencies = []
keywords = ["ros", "rosserial", "serialization", "framing", "embedded", "checksum"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["serialros"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
