"""Common literal values used across workshop_pages.

These constants keep output filenames and suffixes centralized so templates,
composers, the writer, and tests can import the same values without drifting.

Examples
--------
>>> from workshop_pages import _constants
>>> _constants.INDEX_FILENAME
'index.html'
>>> "01-compile.md".removesuffix(_constants.SOURCE_SUFFIX) + _constants.OUTPUT_SUFFIX
'01-compile.html'
"""

INDEX_FILENAME = "index.html"
STYLESHEET_FILENAME = "style.css"
SOURCE_SUFFIX = ".md"
OUTPUT_SUFFIX = ".html"
DEFAULT_OVERVIEW_LINK = "../README.md"
DEFAULT_SOURCE_DIR_NAME = "exercises"
