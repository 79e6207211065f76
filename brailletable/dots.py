"""
# Braille Table: dots.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Dot decoding and dot pattern parsing.

A dot pattern is written as dash-separated groups of lowercase hex digits, e.g. `123-1f-78`.
Each group is one Braille cell, and each digit in a group is one raised dot of that cell.
"""

import re
from enum import Flag
from typing import Optional

from brailletable.constants import HEX_DIGITS
from brailletable.exceptions import EmptyDotGroupException, InvalidHexDigitException
from brailletable.utilities import ParseResult


class BrailleDot(Flag):
    """
    The 16 dot positions of a Braille cell.

    A combination of members is a Braille cell.
    """
    DOT0 = 1 << 0x0
    DOT1 = 1 << 0x1
    DOT2 = 1 << 0x2
    DOT3 = 1 << 0x3
    DOT4 = 1 << 0x4
    DOT5 = 1 << 0x5
    DOT6 = 1 << 0x6
    DOT7 = 1 << 0x7
    DOT8 = 1 << 0x8
    DOT9 = 1 << 0x9
    DOTA = 1 << 0xA
    DOTB = 1 << 0xB
    DOTC = 1 << 0xC
    DOTD = 1 << 0xD
    DOTE = 1 << 0xE
    DOTF = 1 << 0xF


DotPattern = tuple[BrailleDot, ...]

DOT_FROM_HEX_DIGIT = {
    hex_digit: BrailleDot(1 << index)
    for index, hex_digit in enumerate(HEX_DIGITS)
}
DOT_GROUP_PATTERN_COMPILED = re.compile(pattern=r'[^ \t\r\n-]*')


def compute_dot(character: str) -> Optional[BrailleDot]:
    return DOT_FROM_HEX_DIGIT.get(character)


def decode_dot(string: str, position: int = 0) -> BrailleDot:
    """
    Decode the hex digit at `position` into a dot.

    Only `0` to `9` and lowercase `a` to `f` are accepted; uppercase is rejected.
    """
    character = string[position:position + 1]
    dot = compute_dot(character)
    if dot is None:
        raise InvalidHexDigitException(string, position, f'`{character}`')

    return dot


def count_dots(cell: BrailleDot) -> int:
    return bin(cell.value).count('1')


def parse_dot_group(string: str, position: int = 0) -> ParseResult:
    """
    Parse one dot group into a Braille cell.

    The group extends up to the next dash, space, tab, line terminator, or end of string.
    """
    group = DOT_GROUP_PATTERN_COMPILED.match(string, position).group()
    if group == '':
        raise EmptyDotGroupException(string, position)

    cell = BrailleDot(0)
    for offset in range(len(group)):
        cell |= decode_dot(string, position + offset)

    return ParseResult(cell, position + len(group))


def parse_dots(string: str, position: int = 0) -> ParseResult:
    """
    Parse a dot pattern into a tuple of Braille cells.
    """
    cells = []

    while True:
        cell, position = parse_dot_group(string, position)
        cells.append(cell)

        if not string.startswith('-', position):
            break
        position += 1

    return ParseResult(tuple(cells), position)


def format_dots(dots: DotPattern) -> str:
    return '-'.join(
        ''.join(
            hex_digit
            for hex_digit, dot in DOT_FROM_HEX_DIGIT.items()
            if dot in cell
        )
        for cell in dots
    )
