[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mdmindmap"
version = "0.1.0"
description = "Turn the headings of a Markdown document into a text mind map."
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "mind map", "headings", "outline", "tree", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Natural Language :: English",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mdmindmap = "mdmindmap.app:main"
mdmindmap-wizard = "mdmindmap.prompts:main"
mdmindmap-outline = "mdmindmap.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mdmindmap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
