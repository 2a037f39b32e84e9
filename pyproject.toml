[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainaddr"
version = "0.1.0"
description = "Identify, validate and convert Bitcoin, Ethereum and Tron addresses"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["bitcoin", "ethereum", "tron", "address", "base58", "bech32", "checksum"]
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
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["chainaddr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
