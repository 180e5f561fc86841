[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkresolve"
version = "0.1.0"
description = "Resolve links found in local documents into absolute paths and file URLs"
requires-python = ">=3.10"
dependencies = []
keywords = ["link", "checker", "url", "path", "fragment", "resolve", "file-url"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Site Management :: Link Checking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["linkresolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
