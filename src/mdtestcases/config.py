"""Local configuration for mdtestcases."""

from __future__ import annotations

import os


DEFAULT_MARKDOWN_PRESET = "commonmark"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_USER_AGENT = "mdtestcases/0.1"
DEFAULT_LOG_LEVEL = "WARNING"

# markdown-it-py preset used when the caller does not supply a parser.
MDTESTCASES_MARKDOWN_PRESET = os.getenv("MDTESTCASES_MARKDOWN_PRESET", DEFAULT_MARKDOWN_PRESET)
MDTESTCASES_FETCH_TIMEOUT_S = float(os.getenv("MDTESTCASES_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
MDTESTCASES_USER_AGENT = os.getenv("MDTESTCASES_USER_AGENT", DEFAULT_USER_AGENT)
MDTESTCASES_LOG_LEVEL = os.getenv("MDTESTCASES_LOG_LEVEL", DEFAULT_LOG_LEVEL)
