[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dflowcalc"
version = "1.0.0"
description = "Dataflow dependency and critical-path calculator for instruction traces"
requires-python = ">=3.10"
dependencies = []
keywords = ["dataflow", "dependency", "critical path", "instruction trace", "computer architecture"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dflow-calc = "dflowcalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dflowcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
