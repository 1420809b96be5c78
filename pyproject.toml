[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paxlib"
version = "0.1.0"
description = "Fixed-width integer helpers, a bump arena, byte-order conversion, radix formatting and parsing, and a streaming JSON event reader and writer"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "streaming", "arena", "radix", "byte order", "formatting", "parsing"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: File Formats :: JSON",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["paxlib"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
