"""
# Braille Table: lines.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Line records and line classification.

A physical line is tried as, in order:
(1) a rule line (a rule, an optional trailing comment, a line terminator);
(2) a comment line (`#`, arbitrary text, a line terminator);
(3) an empty line (horizontal whitespace, a line terminator).
"""

import re
from dataclasses import dataclass
from typing import Union

from brailletable.exceptions import (
    MissingLineTerminatorException,
    UnrecognisedKeywordException,
    UnrecognisedLineException,
)
from brailletable.rules import Rule, format_rule, parse_rule
from brailletable.utilities import ParseResult

LINE_TERMINATOR_PATTERN_COMPILED = re.compile(pattern=r'\r?\n')
TRAILING_COMMENT_PATTERN_COMPILED = re.compile(
    pattern=r'''
        (?:
            [ \t]+
            (?P<comment> [^\r\n]* )
        ) ?
    ''',
    flags=re.VERBOSE,
)
COMMENT_LINE_PATTERN_COMPILED = re.compile(
    pattern=r'''
        [#] (?P<comment> [^\r\n]* )
    ''',
    flags=re.VERBOSE,
)
EMPTY_LINE_PATTERN_COMPILED = re.compile(pattern=r'[ \t]*')


@dataclass(frozen=True)
class EmptyLine:
    pass


@dataclass(frozen=True)
class CommentLine:
    text: str


@dataclass(frozen=True)
class RuleLine:
    rule: Rule
    comment: str = ''


Line = Union[EmptyLine, CommentLine, RuleLine]


def parse_line_terminator(string: str, position: int) -> int:
    """
    Parse a line terminator.

    Only a line cut short by the end of the string is missing its terminator;
    anything else in place of the terminator is unexpected text.
    """
    line_terminator_match = LINE_TERMINATOR_PATTERN_COMPILED.match(string, position)
    if line_terminator_match is None:
        if position == len(string):
            raise MissingLineTerminatorException(string, position)
        raise UnrecognisedLineException(string, position, 'unexpected text before line terminator')

    return line_terminator_match.end()


def parse_trailing_comment(string: str, position: int = 0) -> ParseResult:
    """
    Parse the remainder of a rule line.

    Whitespace followed by text captures the text verbatim as the comment;
    whitespace-only (or nothing) yields the empty string. Never fails.
    """
    trailing_comment_match = TRAILING_COMMENT_PATTERN_COMPILED.match(string, position)

    comment = trailing_comment_match.group('comment')
    if comment is None:
        comment = ''

    return ParseResult(comment, trailing_comment_match.end())


def parse_rule_line(string: str, position: int = 0) -> ParseResult:
    rule, position = parse_rule(string, position)
    comment, position = parse_trailing_comment(string, position)
    position = parse_line_terminator(string, position)

    return ParseResult(RuleLine(rule, comment), position)


def parse_comment_line(string: str, position: int = 0) -> ParseResult:
    comment_line_match = COMMENT_LINE_PATTERN_COMPILED.match(string, position)
    if comment_line_match is None:
        raise UnrecognisedLineException(string, position, 'expected `#`')

    text = comment_line_match.group('comment')
    position = parse_line_terminator(string, comment_line_match.end())

    return ParseResult(CommentLine(text), position)


def parse_empty_line(string: str, position: int = 0) -> ParseResult:
    whitespace_end = EMPTY_LINE_PATTERN_COMPILED.match(string, position).end()

    if whitespace_end == len(string) and whitespace_end > position:
        raise MissingLineTerminatorException(string, whitespace_end)

    if LINE_TERMINATOR_PATTERN_COMPILED.match(string, whitespace_end) is None:
        raise UnrecognisedLineException(string, position)

    return ParseResult(EmptyLine(), parse_line_terminator(string, whitespace_end))


def parse_line(string: str, position: int = 0) -> ParseResult:
    """
    Parse one physical line into a line record.

    A rule line that fails after its keyword has been recognised is a hard failure,
    since no line beginning with a rule keyword can be a comment line or an empty line.
    """
    try:
        return parse_rule_line(string, position)
    except UnrecognisedKeywordException:
        pass

    try:
        return parse_comment_line(string, position)
    except UnrecognisedLineException:
        pass

    return parse_empty_line(string, position)


def format_line(line: Line) -> str:
    """
    Render a line record back into Braille table syntax, without its line terminator.
    """
    if isinstance(line, EmptyLine):
        return ''

    if isinstance(line, CommentLine):
        return f'#{line.text}'

    if isinstance(line, RuleLine):
        if line.comment == '':
            return format_rule(line.rule)
        return f'{format_rule(line.rule)} {line.comment}'

    raise TypeError(f'not a line: {line!r}')
