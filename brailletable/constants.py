"""
# Braille Table: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2

HEX_DIGITS = '0123456789abcdef'

TABLE_SYNTAX_HELP = '''\
In Braille table syntax, a line must be one of the following:
(1) whitespace-only;
(2) a comment (beginning with `#`);
(3) a rule (`[«prefixes»] «keyword» «arguments» [«comment»]`).
Rules are:
- `include «filename»`
- `undefined «dots»`
- `[«prefixes»] display «characters» «dots»`
- `[«prefixes»] multind «characters» «dots»`
- `largesign «word» «dots»`
- `syllable «word» «dots»`
- `joinword «word» «dots»`
- Note for «prefixes»: one of `noback`, `nofor`, `nocross`,
  `noback nocross`, or `nofor nocross`.
- Note for «dots»: dash-separated groups of lowercase hex digits,
  e.g. `123-1f`.
- Note for «filename»: ASCII letters only.
Every line, including the last, must end with a line terminator.
'''
