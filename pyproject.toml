[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "svckit"
version = "0.1.0"
description = "Building blocks for a small HTTP service: request logging, request validation, multipart upload readers and MySQL record helpers."
requires-python = ">=3.11"
dependencies = [
    "pymysql",
]
keywords = ["http", "service", "validation", "multipart", "csv", "mysql", "logging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["svckit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
