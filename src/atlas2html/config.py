"""Local configuration for atlas2html."""

from __future__ import annotations

import os


DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_ENCODING = "utf-8"

DEFAULT_SECTION = "overview"

# The taxonomy document has no single root node; one is synthesized with these values.
ROOT_NODE_ID = "1"
ROOT_NODE_NAME = "World"

FILE_NAME_PREFIX = "lp_"
FILE_NAME_SUFFIX = ".html"

ATLAS2HTML_LOG_LEVEL = os.getenv("ATLAS2HTML_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
ATLAS2HTML_ENCODING = os.getenv("ATLAS2HTML_ENCODING", DEFAULT_ENCODING)
