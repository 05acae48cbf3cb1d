[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "utilkit"
version = "0.1.0"
description = "Helpers for case conversion, random strings, day differences, time ranges, time and protobuf conversions, UUIDs and dataclass-to-dict mapping."
requires-python = ">=3.10"
dependencies = [
    "protobuf",
]
keywords = ["utilities", "snake-case", "camel-case", "random-string", "datetime", "uuid", "protobuf", "dataclass"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["utilkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
