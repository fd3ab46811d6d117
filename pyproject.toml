[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seata"
version = "0.1.0"
description = "Client-side building blocks for distributed transactions: protocol messages, binary codecs for registration and branch messages, configuration and logging."
requires-python = ">=3.10"
dependencies = []
keywords = ["distributed-transactions", "two-phase-commit", "tcc", "protocol", "codec"]
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
    "Topic :: System :: Distributed Computing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["seata"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
