[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xeddsa"
version = "2.0.0"
description = "XEdDSA signatures, Ed25519/Curve25519 key conversion and X25519 key agreement in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["xeddsa", "ed25519", "curve25519", "x25519", "signature", "cryptography"]
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
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["xeddsa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
