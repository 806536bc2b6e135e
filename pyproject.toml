[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smalltools"
version = "0.1.0"
description = "Small text and file utilities: calendar, cat, ls, tail, comment tools, filters, counters and histograms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cat",
    "ls",
    "calendar",
    "tail",
    "filter",
    "text",
    "comments",
    "histogram",
    "detab",
    "fold",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
smalltools-cal = "smalltools.calendar_month:main"
smalltools-replace = "smalltools.replace:main"
smalltools-substring = "smalltools.substring:main"
smalltools-last = "smalltools.last:main"
smalltools-convert = "smalltools.convert:main"
smalltools-cpp = "smalltools.minicpp:main"
smalltools-cat = "smalltools.minicat:main"
smalltools-ls = "smalltools.minils:main"
smalltools-strip-comments = "smalltools.comments:main_strip"
smalltools-check-brackets = "smalltools.comments:main_check"
smalltools-temperature = "smalltools.temperature:main"
smalltools-count = "smalltools.counting:main"
smalltools-basics = "smalltools.basics:main"
smalltools-lines = "smalltools.lines:main"
smalltools-filter = "smalltools.filters:main"
smalltools-histogram = "smalltools.histogram:main"

[tool.hatch.build.targets.wheel]
packages = ["smalltools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
