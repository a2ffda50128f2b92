[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xlsxfmt"
version = "0.1.0"
description = "Cell styles, conditional formatting rules and column layout models for XLSX spreadsheets"
requires-python = ">=3.10"
dependencies = []
keywords = ["xlsx", "excel", "spreadsheet", "styles", "conditional-formatting", "ooxml"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Spreadsheet",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xlsxfmt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
