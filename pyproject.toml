[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vaultkit"
version = "0.1.0"
description = "Pure-Python SHA-1, SHA-3 and AES, with small data structures and console helpers for a local data vault"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "aes",
    "sha1",
    "sha3",
    "keccak",
    "avl",
    "cryptography",
]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vaultkit"]

[tool.pytest.ini_options]
addopts = "-ra"
