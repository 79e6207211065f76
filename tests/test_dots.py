"""
# Braille Table: test_dots.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `dots.py`.
"""

import unittest

from brailletable.dots import (
    BrailleDot,
    compute_dot,
    count_dots,
    decode_dot,
    format_dots,
    parse_dot_group,
    parse_dots,
)
from brailletable.exceptions import EmptyDotGroupException, InvalidHexDigitException


class TestDots(unittest.TestCase):
    def test_compute_dot(self):
        self.assertEqual(compute_dot('8'), BrailleDot.DOT8)
        self.assertIsNone(compute_dot('F'))
        self.assertIsNone(compute_dot('z'))

    def test_decode_dot(self):
        self.assertEqual(decode_dot('0'), BrailleDot.DOT0)
        self.assertEqual(decode_dot('a'), BrailleDot.DOTA)
        self.assertEqual(decode_dot('f'), BrailleDot.DOTF)

        dots = {decode_dot(character) for character in '0123456789abcdef'}
        self.assertEqual(len(dots), 16)

        for character in 'ABCDEFgz -#\n\f':
            with self.assertRaises(InvalidHexDigitException):
                decode_dot(character)

        self.assertEqual(decode_dot('x1', 1), BrailleDot.DOT1)

        with self.assertRaises(InvalidHexDigitException) as context:
            decode_dot('12F', 2)
        self.assertEqual(context.exception.string, '12F')
        self.assertEqual(context.exception.position, 2)
        self.assertEqual(context.exception.detail, '`F`')

        with self.assertRaises(InvalidHexDigitException):
            decode_dot('')

    def test_parse_dot_group(self):
        self.assertEqual(
            parse_dot_group('123'),
            (BrailleDot.DOT1 | BrailleDot.DOT2 | BrailleDot.DOT3, 3),
        )
        self.assertEqual(parse_dot_group('0'), (BrailleDot.DOT0, 1))
        self.assertEqual(parse_dot_group('1f 2', 0), (BrailleDot.DOT1 | BrailleDot.DOTF, 2))

        for group in ['1', '11', '121', 'fedcba9876543210', 'aabbcc0']:
            cell, _ = parse_dot_group(group)
            self.assertEqual(count_dots(cell), len(set(group)))

    def test_parse_dots(self):
        self.assertEqual(parse_dots('123'), ((BrailleDot.DOT1 | BrailleDot.DOT2 | BrailleDot.DOT3,), 3))
        self.assertEqual(parse_dots('1f'), ((BrailleDot.DOT1 | BrailleDot.DOTF,), 2))
        self.assertEqual(
            parse_dots('123-1f'),
            (
                (
                    BrailleDot.DOT1 | BrailleDot.DOT2 | BrailleDot.DOT3,
                    BrailleDot.DOT1 | BrailleDot.DOTF,
                ),
                6,
            ),
        )
        self.assertEqual(
            parse_dots('123-1f-78'),
            (
                (
                    BrailleDot.DOT1 | BrailleDot.DOT2 | BrailleDot.DOT3,
                    BrailleDot.DOT1 | BrailleDot.DOTF,
                    BrailleDot.DOT7 | BrailleDot.DOT8,
                ),
                9,
            ),
        )
        self.assertEqual(parse_dots('x 12-3 y', 2), ((BrailleDot.DOT1 | BrailleDot.DOT2, BrailleDot.DOT3), 6))

    def test_parse_dots_failures(self):
        with self.assertRaises(InvalidHexDigitException) as context:
            parse_dots('huhu')
        self.assertEqual(context.exception.position, 0)
        self.assertEqual(context.exception.remainder, 'huhu')

        with self.assertRaises(InvalidHexDigitException) as context:
            parse_dots('12-3F')
        self.assertEqual(context.exception.position, 4)

        with self.assertRaises(EmptyDotGroupException) as context:
            parse_dots('')
        self.assertEqual(context.exception.position, 0)

        with self.assertRaises(EmptyDotGroupException) as context:
            parse_dots('12--3')
        self.assertEqual(context.exception.position, 3)

        with self.assertRaises(EmptyDotGroupException) as context:
            parse_dots('12-\n')
        self.assertEqual(context.exception.position, 3)

    def test_format_dots(self):
        self.assertEqual(format_dots(parse_dots('321-f1-78').value), '123-1f-78')
        self.assertEqual(format_dots((BrailleDot.DOT0,)), '0')


if __name__ == '__main__':
    unittest.main()
