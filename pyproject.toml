[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fractscope"
version = "0.1.0"
description = "Interactive explorer for the Mandelbrot set, a Julia set and the Burning Ship fractal"
requires-python = ">=3.10"
keywords = ["fractal", "mandelbrot", "julia", "burning-ship", "escape-time"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fractscope = "fractscope.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fractscope"]

[tool.pytest.ini_options]
addopts = "-ra"
