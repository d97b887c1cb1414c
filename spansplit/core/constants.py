"""
Constants for spansplit.

This module holds the default settings used by the command-line interface
and the convenience adapters.
"""

# Available CLI modes
MODE_CONSECUTIVE = "consecutive"
MODE_EQUAL_LENGTH = "equal-length"
MODE_GAP = "gap"
MODES = (MODE_CONSECUTIVE, MODE_EQUAL_LENGTH, MODE_GAP)

# CLI defaults
DEFAULT_MODE = MODE_CONSECUTIVE
DEFAULT_GAP = 1

# Output formatting, mirrors the documented worked example
SPAN_LINE_FORMAT = "span = {items}"
LENGTH_LINE_FORMAT = "{length}"

# Progress bar settings
PROGRESS_UNIT = "tokens"
PROGRESS_DESC = "Splitting"
