[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "whereloc"
version = "0.0.1"
description = "Locate the binary, source and manual page files for a command"
requires-python = ">=3.10"
dependencies = []
keywords = ["whereis", "locate", "binaries", "manuals", "sources", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
whereis = "whereloc.whereis:main"

[tool.hatch.build.targets.wheel]
packages = ["whereloc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
