[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memsim"
version = "0.1.0"
description = "Interactive simulator of dynamic memory partition allocation (first-fit, best-fit, worst-fit, next-fit)"
requires-python = ">=3.10"
dependencies = []
keywords = ["memory", "simulation", "partitions", "first-fit", "best-fit", "worst-fit", "next-fit", "operating-systems"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
memsim = "memsim.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["memsim"]

[tool.pytest.ini_options]
addopts = "-ra"
