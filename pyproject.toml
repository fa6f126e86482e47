[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prototool"
version = "0.1.0"
description = "Building blocks for Protobuf tooling: config scaffolding, new-file templates, formatting diffs, descriptor-set ordering and a command-line front end."
requires-python = ">=3.10"
dependencies = [
    "protobuf",
]
keywords = ["protobuf", "protoc", "grpc", "code generation", "lint", "tooling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: MacOS",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["prototool"]

[tool.hatch.build.targets.sdist]
include = ["prototool", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
