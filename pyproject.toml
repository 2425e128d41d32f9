[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "efitypes"
version = "0.1.0"
description = "UEFI data types: GUIDs, Latin-1 and UCS-2 characters and strings, C-style enums, and a line-decorating logging handler"
requires-python = ">=3.10"
dependencies = []
keywords = ["uefi", "efi", "guid", "ucs-2", "latin-1", "firmware", "strings", "logging"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["efitypes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
