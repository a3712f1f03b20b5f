[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "healthmon"
version = "0.1.0"
description = "Concurrent HTTP health monitor that checks URLs and reports failures, slow responses and status changes"
requires-python = ">=3.10"
dependencies = []
keywords = ["health-check", "monitoring", "http", "uptime", "latency"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
healthmon = "healthmon.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["healthmon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
