[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "foodreport"
version = "0.1.0"
description = "Read a food inventory file and print a report of vegetables, fruit and dairy items"
requires-python = ">=3.10"
dependencies = []
keywords = ["food", "inventory", "report", "refrigerator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
foodreport = "foodreport.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["foodreport"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
