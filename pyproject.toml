[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ncsock"
version = "0.1.0"
description = "Raw packet building, checksums, frame header parsing and small network helpers"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["network", "packets", "tcp", "udp", "icmp", "icmpv6", "igmp", "ipv4", "ipv6", "checksum", "base64"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ncsock"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
