[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "served"
version = "0.1.0"
description = "Building blocks for HTTP request routing: path segment matchers, REST parameters, per-method handler registries and an access log plugin"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "routing", "rest", "path-matching", "handlers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["served"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
