[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hostprobe"
version = "0.0.1"
description = "Collect a snapshot of host resources and settings as JSON or YAML"
requires-python = ">=3.10"
keywords = ["system", "inventory", "monitoring", "precheck", "hardware", "collector"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
    "Topic :: System :: Systems Administration",
]
dependencies = [
    "psutil",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hostprobe = "hostprobe.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hostprobe"]

[tool.pytest.ini_options]
addopts = "-ra"
