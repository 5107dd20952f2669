[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashmesh"
version = "0.1.0"
description = "Building blocks for a hash-IP mesh network node: binary serialization, hash-IP addresses, peering statistics and a small JSON RPC server"
requires-python = ">=3.10"
dependencies = []
keywords = ["mesh", "ipv6", "serialization", "varint", "rpc", "networking"]
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
    "Topic :: System :: Networking",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hashmesh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
