[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scopeview"
version = "0.1.0"
description = "Four-channel oscilloscope viewer with voltage traces, FFT spectrum and serial sample capture"
requires-python = ">=3.10"
keywords = ["oscilloscope", "serial", "fft", "spectrum", "visualization", "signals"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "matplotlib",
    "pyserial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
scopeview = "scopeview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["scopeview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
