[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crabdrill"
version = "0.1.0"
description = "Tools for small hands-on compiler exercises: loading, compiling, checking progress, and worked solutions"
requires-python = ">=3.11"
keywords = ["exercises", "learning", "tutorial", "compiler", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["crabdrill"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
