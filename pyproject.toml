[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agentws"
version = "1.5.0"
description = "Manage isolated workspaces for AI agents: listing, entering, syncing and resetting workspaces, with shell integration, agent hooks and tmux bindings."
requires-python = ">=3.10"
dependencies = [
    "tomlkit",
]
keywords = ["workspace", "agents", "tmux", "git", "shell", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
aw = "agentws.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["agentws"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
