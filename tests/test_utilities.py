"""
# Braille Table: test_utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `utilities.py`.
"""

import unittest

from brailletable.utilities import compute_column_number, compute_line_number, extract_line


class TestUtilities(unittest.TestCase):
    def test_compute_line_number(self):
        self.assertEqual(compute_line_number('', 0), 1)
        self.assertEqual(compute_line_number('abc\ndef\n', 3), 1)
        self.assertEqual(compute_line_number('abc\ndef\n', 4), 2)
        self.assertEqual(compute_line_number('abc\r\ndef\r\n', 5), 2)
        self.assertEqual(compute_line_number('abc\ndef\n', 8), 3)

    def test_compute_column_number(self):
        self.assertEqual(compute_column_number('', 0), 1)
        self.assertEqual(compute_column_number('abc\ndef\n', 2), 3)
        self.assertEqual(compute_column_number('abc\ndef\n', 4), 1)
        self.assertEqual(compute_column_number('abc\ndef\n', 6), 3)

    def test_extract_line(self):
        self.assertEqual(extract_line('abc\ndef\nghi', 5), 'def')
        self.assertEqual(extract_line('abc\r\ndef\r\n', 1), 'abc')
        self.assertEqual(extract_line('abc\ndef\nghi', 8), 'ghi')
        self.assertEqual(extract_line('abc\n', 4), '')


if __name__ == '__main__':
    unittest.main()
