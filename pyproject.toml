[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weatherbycep"
version = "0.1.0"
description = "HTTP service that returns the current temperature for a Brazilian zipcode (CEP)"
requires-python = ">=3.10"
keywords = ["weather", "cep", "zipcode", "temperature", "http"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
weatherbycep = "weatherbycep.main:main"

[tool.hatch.build.targets.wheel]
packages = ["weatherbycep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
