[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nci"
version = "0.2.1"
description = "Use the right package manager"
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "npm", "pnpm", "yarn", "bun", "package-manager"]
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
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ni = "nci.cli:ni_main"
nr = "nci.cli:nr_main"
nci = "nci.cli:nci_main"
na = "nci.cli:na_main"
nlx = "nci.cli:nlx_main"
nu = "nci.cli:nu_main"
nun = "nci.cli:nun_main"

[tool.hatch.build.targets.wheel]
packages = ["nci"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
