[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parlab"
version = "0.1.0"
description = "Bucket sort, histogram and friendly-number experiments with sequential and worker-thread variants"
requires-python = ">=3.10"
dependencies = []
keywords = ["bucket sort", "histogram", "friendly numbers", "abundancy", "threads"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parlab-genlist = "parlab.genlist:main"
parlab-bucket = "parlab.bucket:main"
parlab-friendly = "parlab.friendly:main"
parlab-histogram = "parlab.histogram:main"

[tool.hatch.build.targets.wheel]
packages = ["parlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
