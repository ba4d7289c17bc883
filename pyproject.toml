[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starpatterns"
version = "0.1.0"
description = "Number, letter and star patterns plus multiplication tables for the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["patterns", "pyramid", "triangle", "exercises", "education", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
starpatterns = "starpatterns.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["starpatterns"]

[tool.pytest.ini_options]
addopts = "-ra"
