"""
# Braille Table: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core table parsing logic.

A Braille table is parsed line by line into an ordered tuple of line records.
Parsing stops at the first line that cannot be parsed;
what to do with the unparsed remainder is up to the caller.
"""

from dataclasses import dataclass
from typing import Optional

from brailletable.exceptions import ParseException
from brailletable.lines import Line, RuleLine, parse_line
from brailletable.rules import IncludeRule


@dataclass(frozen=True)
class TableParse:
    """
    The result of parsing a table.

    `failure` is the exception raised by the line at which parsing stopped,
    or None if the whole string was consumed.
    """
    lines: tuple[Line, ...]
    string: str
    position: int
    failure: Optional[ParseException] = None

    @property
    def remainder(self) -> str:
        return self.string[self.position:]

    @property
    def is_complete(self) -> bool:
        return self.position == len(self.string)


def parse_table(string: str, position: int = 0) -> TableParse:
    """
    Parse a table into line records.

    Never raises; stops at end of string or at the first unparsable line.
    """
    lines = []
    failure = None

    while position < len(string):
        try:
            line, position = parse_line(string, position)
        except ParseException as parse_exception:
            failure = parse_exception
            break

        lines.append(line)

    return TableParse(tuple(lines), string, position, failure)


def load_table(string: str) -> tuple[Line, ...]:
    """
    Parse a table, raising the failure if any part of it cannot be parsed.
    """
    table_parse = parse_table(string)
    if table_parse.failure is not None:
        raise table_parse.failure

    return table_parse.lines


def extract_included_file_names(lines: tuple[Line, ...]) -> list[str]:
    return [
        line.rule.filename
        for line in lines
        if isinstance(line, RuleLine) and isinstance(line.rule, IncludeRule)
    ]
