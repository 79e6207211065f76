"""
# Braille Table: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import sys
import traceback

from brailletable._version import __version__
from brailletable.constants import COMMAND_LINE_ERROR_EXIT_CODE, GENERIC_ERROR_EXIT_CODE, TABLE_SYNTAX_HELP
from brailletable.core import parse_table
from brailletable.exceptions import ParseException
from brailletable.lines import format_line
from brailletable.utilities import extract_line

DESCRIPTION = '''
    Check the syntax of Braille translation tables.
'''
TABLE_FILE_NAME_HELP = '''
    name of table file to be checked
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every line parsed)
'''


def print_error(message: str, table_file_name: str, line_number: int, column_number: int):
    print(f'error: `{table_file_name}`, line {line_number}, column {column_number}: {message}', file=sys.stderr)


def print_parse_failure(parse_exception: ParseException, table_file_name: str, verbose_mode_enabled: bool):
    message = parse_exception.reason
    if parse_exception.detail is not None:
        message = f'{message} ({parse_exception.detail})'

    print_error(message, table_file_name, parse_exception.line_number, parse_exception.column_number)
    print(f'    {extract_line(parse_exception.string, parse_exception.position)}', file=sys.stderr)
    print(f'    {" " * (parse_exception.column_number - 1)}^\n', file=sys.stderr)
    print(TABLE_SYNTAX_HELP, file=sys.stderr)

    if verbose_mode_enabled:
        traceback.print_exception(type(parse_exception), parse_exception, parse_exception.__traceback__)


def parse_command_line_arguments(arguments=None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'table_file_names',
        help=TABLE_FILE_NAME_HELP,
        metavar='file.tbl',
        nargs='+',
    )

    return argument_parser.parse_args(arguments)


def check_table_file(table_file_name: str, verbose_mode_enabled: bool):
    try:
        with open(table_file_name, 'r', encoding='utf-8', newline='') as table_file:
            table = table_file.read()
    except FileNotFoundError:
        print(f'error: argument `{table_file_name}`: file not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
    except UnicodeDecodeError:
        print(f'error: `{table_file_name}`: not valid UTF-8', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    table_parse = parse_table(table)

    if verbose_mode_enabled:
        for line_number, line in enumerate(table_parse.lines, start=1):
            print(f'{line_number}: {format_line(line)}')

    if table_parse.failure is not None:
        print_parse_failure(table_parse.failure, table_file_name, verbose_mode_enabled)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    print(f'success: parsed `{table_file_name}` ({len(table_parse.lines)} lines)')


def main(arguments=None):
    parsed_arguments = parse_command_line_arguments(arguments)
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled

    for table_file_name in parsed_arguments.table_file_names:
        check_table_file(table_file_name, verbose_mode_enabled)


if __name__ == '__main__':
    main()
