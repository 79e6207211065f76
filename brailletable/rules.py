"""
# Braille Table: rules.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Rule records and rule parsing.

Braille table rule syntax:
````
include «filename»
undefined «dots»
[«prefixes»] display «characters» «dots»
[«prefixes»] multind «characters» «dots»
largesign «word» «dots»
syllable «word» «dots»
joinword «word» «dots»
````
where «filename» is ASCII letters only,
and «characters» and «word» are letters of any script.
"""

import re
from dataclasses import dataclass
from typing import Callable, ClassVar, Union

import regex

from brailletable.dots import DotPattern, format_dots, parse_dots
from brailletable.exceptions import MissingArgumentException, ParseException, UnrecognisedKeywordException
from brailletable.prefixes import Prefix, format_prefixes, parse_prefixes
from brailletable.utilities import ParseResult

WHITESPACE_PATTERN_COMPILED = re.compile(pattern=r'[ \t]+')
ASCII_WORD_PATTERN_COMPILED = re.compile(pattern=r'[A-Za-z]+')
WORD_PATTERN_COMPILED = regex.compile(pattern=r'\p{Alphabetic}+')


@dataclass(frozen=True)
class IncludeRule:
    KEYWORD: ClassVar[str] = 'include'

    filename: str


@dataclass(frozen=True)
class UndefinedRule:
    KEYWORD: ClassVar[str] = 'undefined'

    dots: DotPattern


@dataclass(frozen=True)
class DisplayRule:
    KEYWORD: ClassVar[str] = 'display'

    chars: str
    dots: DotPattern
    prefixes: Prefix = Prefix(0)


@dataclass(frozen=True)
class MultindRule:
    KEYWORD: ClassVar[str] = 'multind'

    chars: str
    dots: DotPattern
    prefixes: Prefix = Prefix(0)


@dataclass(frozen=True)
class LargesignRule:
    KEYWORD: ClassVar[str] = 'largesign'

    word: str
    dots: DotPattern


@dataclass(frozen=True)
class SyllableRule:
    KEYWORD: ClassVar[str] = 'syllable'

    word: str
    dots: DotPattern


@dataclass(frozen=True)
class JoinwordRule:
    KEYWORD: ClassVar[str] = 'joinword'

    word: str
    dots: DotPattern


Rule = Union[
    IncludeRule,
    UndefinedRule,
    DisplayRule,
    MultindRule,
    LargesignRule,
    SyllableRule,
    JoinwordRule,
]


def parse_whitespace(string: str, position: int, expected_after: str) -> int:
    whitespace_match = WHITESPACE_PATTERN_COMPILED.match(string, position)
    if whitespace_match is None:
        raise MissingArgumentException(string, position, f'expected whitespace after {expected_after}')

    return whitespace_match.end()


def parse_keyword(string: str, position: int, keyword: str) -> int:
    """
    Parse a rule keyword and the whitespace that must follow it.
    """
    if not string.startswith(keyword, position):
        raise UnrecognisedKeywordException(string, position, f'expected `{keyword}`')

    return parse_whitespace(string, position + len(keyword), f'`{keyword}`')


def parse_word(string: str, position: int, keyword: str) -> ParseResult:
    word_match = WORD_PATTERN_COMPILED.match(string, position)
    if word_match is None:
        raise MissingArgumentException(string, position, f'expected a word for `{keyword}`')

    return ParseResult(word_match.group(), word_match.end())


def parse_ascii_word(string: str, position: int, keyword: str) -> ParseResult:
    word_match = ASCII_WORD_PATTERN_COMPILED.match(string, position)
    if word_match is None:
        raise MissingArgumentException(string, position, f'expected an ASCII word for `{keyword}`')

    return ParseResult(word_match.group(), word_match.end())


def parse_dots_argument(string: str, position: int, keyword: str) -> ParseResult:
    if position == len(string) or string[position] in ' \t\r\n':
        raise MissingArgumentException(string, position, f'expected dots for `{keyword}`')

    return parse_dots(string, position)


def parse_word_and_dots(string: str, position: int, keyword: str) -> ParseResult:
    """
    Parse `«keyword» «word» «dots»`, yielding `(word, dots)`.
    """
    position = parse_keyword(string, position, keyword)
    word, position = parse_word(string, position, keyword)
    position = parse_whitespace(string, position, f'word for `{keyword}`')
    dots, position = parse_dots_argument(string, position, keyword)

    return ParseResult((word, dots), position)


def parse_include_rule(string: str, position: int = 0) -> ParseResult:
    keyword = IncludeRule.KEYWORD
    position = parse_keyword(string, position, keyword)
    filename, position = parse_ascii_word(string, position, keyword)

    return ParseResult(IncludeRule(filename), position)


def parse_undefined_rule(string: str, position: int = 0) -> ParseResult:
    keyword = UndefinedRule.KEYWORD
    position = parse_keyword(string, position, keyword)
    dots, position = parse_dots_argument(string, position, keyword)

    return ParseResult(UndefinedRule(dots), position)


def parse_display_rule(string: str, position: int = 0) -> ParseResult:
    prefixes, position = parse_prefixes(string, position)
    (chars, dots), position = parse_word_and_dots(string, position, DisplayRule.KEYWORD)

    return ParseResult(DisplayRule(chars, dots, prefixes), position)


def parse_multind_rule(string: str, position: int = 0) -> ParseResult:
    prefixes, position = parse_prefixes(string, position)
    (chars, dots), position = parse_word_and_dots(string, position, MultindRule.KEYWORD)

    return ParseResult(MultindRule(chars, dots, prefixes), position)


def parse_largesign_rule(string: str, position: int = 0) -> ParseResult:
    (word, dots), position = parse_word_and_dots(string, position, LargesignRule.KEYWORD)

    return ParseResult(LargesignRule(word, dots), position)


def parse_syllable_rule(string: str, position: int = 0) -> ParseResult:
    (word, dots), position = parse_word_and_dots(string, position, SyllableRule.KEYWORD)

    return ParseResult(SyllableRule(word, dots), position)


def parse_joinword_rule(string: str, position: int = 0) -> ParseResult:
    (word, dots), position = parse_word_and_dots(string, position, JoinwordRule.KEYWORD)

    return ParseResult(JoinwordRule(word, dots), position)


RULE_PARSERS: tuple[Callable[[str, int], ParseResult], ...] = (
    parse_include_rule,
    parse_undefined_rule,
    parse_display_rule,
    parse_multind_rule,
    parse_largesign_rule,
    parse_joinword_rule,
    parse_syllable_rule,
)


def parse_rule(string: str, position: int = 0) -> ParseResult:
    """
    Parse a rule, trying each rule parser in turn.

    The first parser to succeed wins.
    If all fail, the first failure raised after a keyword was recognised is re-raised,
    otherwise `UnrecognisedKeywordException` is raised at `position`.
    """
    first_exception = None

    for rule_parser in RULE_PARSERS:
        try:
            return rule_parser(string, position)
        except UnrecognisedKeywordException:
            continue
        except ParseException as parse_exception:
            if first_exception is None:
                first_exception = parse_exception

    if first_exception is not None:
        raise first_exception

    raise UnrecognisedKeywordException(string, position)


def format_rule(rule: Rule) -> str:
    """
    Render a rule back into Braille table syntax.
    """
    if isinstance(rule, IncludeRule):
        return f'{rule.KEYWORD} {rule.filename}'

    if isinstance(rule, UndefinedRule):
        return f'{rule.KEYWORD} {format_dots(rule.dots)}'

    if isinstance(rule, (DisplayRule, MultindRule)):
        return f'{format_prefixes(rule.prefixes)}{rule.KEYWORD} {rule.chars} {format_dots(rule.dots)}'

    if isinstance(rule, (LargesignRule, SyllableRule, JoinwordRule)):
        return f'{rule.KEYWORD} {rule.word} {format_dots(rule.dots)}'

    raise TypeError(f'not a rule: {rule!r}')
