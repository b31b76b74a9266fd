[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modcrypt"
version = "0.1.0"
description = "Modular arithmetic toolkit: Fermat exponentiation, extended Euclid, ElGamal encryption and a known-plaintext attack"
requires-python = ">=3.10"
dependencies = []
keywords = ["elgamal", "modular-arithmetic", "fermat", "euclid", "discrete-log", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
modcrypt = "modcrypt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["modcrypt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
