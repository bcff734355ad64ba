[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sheetxml"
version = "0.1.0"
description = "Models for the XML parts of XLSX spreadsheet files: styles, themes, shared strings, workbook and content types."
requires-python = ">=3.10"
dependencies = []
keywords = ["xlsx", "spreadsheet", "excel", "ooxml", "xml", "styles"]
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
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sheetxml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
