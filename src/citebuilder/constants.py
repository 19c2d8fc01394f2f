from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates the template syntax characters to reduce cross-module
coupling between the validator, segmenter, expander and escaper.
"""

ESCAPE_MARK: str = '\\'
OPEN_BRACE: str = '{'
CLOSE_BRACE: str = '}'
TOKEN_MARK: str = '@'

# Separator used to join the truthy members of a combo token (@A+B+C).
COMBO_SEPARATOR: str = ', '
COMBO_JOINER: str = '+'

# Debug placeholder for unresolved tokens; formatted with key=<token key>.
DEBUG_PLACEHOLDER: str = '[{key}]'

# Backslashes inside inserted values are parked on this private-use code point
# until the final unescape, so a value can never escape the template's syntax.
VALUE_BACKSLASH: str = '\uE000'
