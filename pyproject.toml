[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "echoreactor"
version = "0.1.0"
description = "A single-threaded reactor-style TCP echo server and a matching word client"
requires-python = ">=3.10"
dependencies = []
keywords = ["echo", "reactor", "tcp", "event-loop", "selectors", "networking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
echoreactor-server = "echoreactor.server:main"
echoreactor-client = "echoreactor.client:main"

[tool.hatch.build.targets.wheel]
packages = ["echoreactor"]

[tool.pytest.ini_options]
addopts = "-ra"
