[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dockerstats"
version = "0.2.0"
description = "Visualize container stats with real-time charts directly in your terminal."
requires-python = ">=3.10"
dependencies = []
keywords = ["docker", "container", "stats", "monitoring", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ds = "dockerstats.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dockerstats"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
