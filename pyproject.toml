[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tcattrs"
version = "0.1.0"
description = "Encode and decode Linux traffic-control netlink attributes for qdiscs and actions"
requires-python = ">=3.10"
dependencies = []
keywords = ["netlink", "traffic-control", "tc", "qdisc", "rtnetlink", "linux", "networking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tcattrs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
