[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bmeclient"
version = "0.1.0"
description = "TCP client that polls a BME680 sensor server and waits its turn in the server's queue"
requires-python = ">=3.10"
dependencies = []
keywords = ["bme680", "tcp", "sensor", "client", "socket"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bmeclient = "bmeclient.client:main"

[tool.hatch.build.targets.wheel]
packages = ["bmeclient"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
