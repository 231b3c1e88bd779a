[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ibag"
version = "0.3.4"
description = "A thread-safe shared bag for holding any value, plus a thread-confined cell"
requires-python = ">=3.10"
dependencies = []
keywords = ["thread-safe", "lock", "rwlock", "container", "thread-confinement"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ibag"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
