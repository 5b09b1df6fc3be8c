[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nexacoin"
version = "0.1.0"
description = "A small blockchain framework with P-256 wallets, blocks, transactions and validators"
requires-python = ">=3.10"
keywords = ["blockchain", "cryptocurrency", "wallet", "validator", "p-256", "ripemd160"]
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
dependencies = [
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
nexacoin = "nexacoin.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nexacoin"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
