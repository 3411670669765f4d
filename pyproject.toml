[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "burbir"
version = "0.1.0"
description = "A small console social network with posts, hashtags, replies, drafts, threads and friend groups, stored in plain-text config folders."
requires-python = ">=3.10"
dependencies = []
keywords = ["social", "console", "microblog", "cli", "data-structures"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
burbir = "burbir.commands:main"

[tool.hatch.build.targets.wheel]
packages = ["burbir"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
