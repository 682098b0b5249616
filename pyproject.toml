[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pmx"
version = "0.1.0"
description = "A prompt management suite for coding-agent system prompts"
requires-python = ">=3.11"
keywords = ["prompt", "profiles", "claude", "codex", "cli", "markdown"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pmx = "pmx.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pmx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
