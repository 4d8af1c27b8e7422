[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "urdfkit"
version = "0.1.0"
description = "Parser for URDF robot descriptions and world files"
requires-python = ">=3.10"
dependencies = []
keywords = ["urdf", "robotics", "robot-model", "xml", "parser", "kinematics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
check-urdf = "urdfkit.check:main"

[tool.setuptools.packages.find]
include = ["urdfkit*"]

[tool.pytest.ini_options]
addopts = "-ra"
