[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinkerkit"
version = "0.1.0"
description = "An expression calculator, 2D/3D shape types, an expression line-editor model, and small TCP echo and address-lookup tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "expression", "geometry", "polygon", "echo", "tcp", "getaddrinfo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinkerkit-calc = "tinkerkit.calculator:main"
tinkerkit-echo-server = "tinkerkit.echo_server:main"
tinkerkit-echo-client = "tinkerkit.echo_client:main"
tinkerkit-showip = "tinkerkit.showip:main"

[tool.hatch.build.targets.wheel]
packages = ["tinkerkit"]

[tool.pytest.ini_options]
addopts = "-ra"
