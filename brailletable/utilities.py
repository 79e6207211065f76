"""
# Braille Table: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re
from typing import Any, NamedTuple

LINE_CONTENT_PATTERN_COMPILED = re.compile(pattern=r'[^\r\n]*')


class ParseResult(NamedTuple):
    value: Any
    position: int


def compute_line_number(string: str, position: int) -> int:
    """
    Compute the 1-based line number of an offset.

    Only `\\n` is counted, so that `\\r\\n` counts as a single line terminator.
    """
    return string.count('\n', 0, position) + 1


def compute_column_number(string: str, position: int) -> int:
    line_start = string.rfind('\n', 0, position) + 1
    return position - line_start + 1


def extract_line(string: str, position: int) -> str:
    """
    Extract the physical line containing an offset, without its line terminator.
    """
    line_start = string.rfind('\n', 0, position) + 1
    line_match = LINE_CONTENT_PATTERN_COMPILED.match(string, line_start)

    return line_match.group()
