[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "laminar"
version = "0.1.0"
description = "Reliability, ordering, sequencing and fragmentation building blocks for a message-based protocol over UDP"
requires-python = ">=3.10"
dependencies = []
keywords = ["udp", "networking", "reliability", "ordering", "sequencing", "fragmentation", "acknowledgment"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Networking",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["laminar"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
