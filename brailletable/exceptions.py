"""
# Braille Table: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.

Every parse failure records the string being parsed and the offset at which parsing failed.
The unconsumed input is then `string[position:]`,
and line and column numbers are derived from the line terminators consumed before `position`.
"""

from typing import Optional

from brailletable.utilities import compute_column_number, compute_line_number


class ParseException(Exception):
    """
    Base class for a failure to parse Braille table syntax.
    """
    reason = 'parse failure'

    _string: str
    _position: int
    _detail: Optional[str]

    def __init__(self, string: str, position: int, detail: Optional[str] = None):
        self._string = string
        self._position = position
        self._detail = detail

        message = f'{self.reason} at offset {position}'
        if detail is not None:
            message = f'{message} ({detail})'
        super().__init__(message)

    @property
    def string(self) -> str:
        return self._string

    @property
    def position(self) -> int:
        return self._position

    @property
    def detail(self) -> Optional[str]:
        return self._detail

    @property
    def remainder(self) -> str:
        return self._string[self._position:]

    @property
    def line_number(self) -> int:
        return compute_line_number(self._string, self._position)

    @property
    def column_number(self) -> int:
        return compute_column_number(self._string, self._position)


class InvalidHexDigitException(ParseException):
    reason = 'not a hex digit'


class EmptyDotGroupException(ParseException):
    reason = 'empty dot group'


class UnrecognisedKeywordException(ParseException):
    reason = 'unrecognised rule keyword'


class MissingArgumentException(ParseException):
    reason = 'missing argument'


class MissingLineTerminatorException(ParseException):
    reason = 'missing line terminator'


class UnrecognisedLineException(ParseException):
    reason = 'unrecognised line'
