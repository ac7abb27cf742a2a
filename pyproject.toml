[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "oslabsim"
version = "1.0.0"
description = "Small simulations of classic operating-system algorithms: CPU and disk scheduling, paging, memory and file allocation, deadlock avoidance and synchronization."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "scheduling",
    "paging",
    "bankers algorithm",
    "disk scheduling",
    "memory allocation",
    "file allocation",
    "simulation",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oslabsim = "oslabsim.cli:main"

[tool.setuptools.packages.find]
include = ["oslabsim*"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
