[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "huepicker"
version = "0.1.0"
description = "An HSV colour picker model: hue/saturation wheel, value slider and numeric fields kept in sync."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["color", "colour", "picker", "hsv", "rgb", "color-wheel"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
huepicker = "huepicker.app:main"

[tool.hatch.build.targets.wheel]
packages = ["huepicker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
