[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "icssdk"
version = "0.1.0"
description = "Client library for the ICS virtualization management REST API"
requires-python = ">=3.10"
keywords = ["ics", "virtualization", "rest", "sdk", "vm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Systems Administration",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["icssdk"]

[tool.pytest.ini_options]
addopts = "-ra"
