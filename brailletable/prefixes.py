"""
# Braille Table: prefixes.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Rule prefix parsing.
"""

import re
from enum import Flag, auto

from brailletable.utilities import ParseResult


class Prefix(Flag):
    NOBACK = auto()
    NOFOR = auto()
    NOCROSS = auto()


PREFIXES_PATTERN_COMPILED = re.compile(
    pattern=r'''
        (?:
            (?P<noback_nocross> noback [ \t]+ nocross [ \t]+ )
                |
            (?P<nofor_nocross> nofor [ \t]+ nocross [ \t]+ )
                |
            (?P<nofor> nofor [ \t]+ )
                |
            (?P<noback> noback [ \t]+ )
                |
            (?P<nocross> nocross [ \t]+ )
        ) ?
    ''',
    flags=re.ASCII | re.VERBOSE,
)
PREFIXES_FROM_GROUP_NAME = {
    'noback_nocross': Prefix.NOBACK | Prefix.NOCROSS,
    'nofor_nocross': Prefix.NOFOR | Prefix.NOCROSS,
    'nofor': Prefix.NOFOR,
    'noback': Prefix.NOBACK,
    'nocross': Prefix.NOCROSS,
}


def parse_prefixes(string: str, position: int = 0) -> ParseResult:
    """
    Parse optional rule prefixes.

    Combined forms are tried before single keywords,
    so that `noback nocross ` is consumed in full.
    Never fails; if no prefix is present, the empty set is returned and nothing is consumed.
    """
    prefixes_match = PREFIXES_PATTERN_COMPILED.match(string, position)

    group_name = prefixes_match.lastgroup
    if group_name is None:
        return ParseResult(Prefix(0), position)

    return ParseResult(PREFIXES_FROM_GROUP_NAME[group_name], prefixes_match.end())


def format_prefixes(prefixes: Prefix) -> str:
    return ''.join(
        f'{prefix.name.lower()} '
        for prefix in (Prefix.NOBACK, Prefix.NOFOR, Prefix.NOCROSS)
        if prefix in prefixes
    )
