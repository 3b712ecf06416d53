[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "packetbuf"
version = "0.1.0"
description = "Length-prefixed packet writing and reading with VarInts, fixed-width integers and scatter-gather segments"
requires-python = ">=3.10"
dependencies = []
keywords = ["varint", "packet", "buffer", "serialization", "protocol", "scatter-gather", "writev"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
packetbuf = "packetbuf.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["packetbuf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
