[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tronkit"
version = "0.1.0"
description = "TRON toolkit: Base58Check addresses, contract ABI parameter encoding, input parsing helpers and a small command line"
requires-python = ">=3.10"
keywords = ["tron", "trx", "blockchain", "base58", "abi", "exchange", "proposal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
dependencies = [
    "pycryptodome",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tronctl = "tronkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tronkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
