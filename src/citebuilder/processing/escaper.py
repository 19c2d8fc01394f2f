"""
escaper – Protects literal template characters inside substituted values.

Values pulled from the data mapping may legitimately contain ``{``, ``}`` or
``@`` (e.g. an e-mail address or a title with braces). Before such a value is
written back into the partially expanded template each of those characters is
prefixed with a backslash, so later passes never read it as template syntax:

  • ``{`` → ``\\{``
  • ``}`` → ``\\}``
  • ``@`` → ``\\@``

:meth:`Escaper.unescape` reverses the three mappings and is applied exactly
once, after the last expansion pass. Backslashes already present in a value
are parked on a private-use code point first, so a value ending in ``\\``
cannot escape the template brace that follows it.

Template-authored escapes (``\\@`` written by hand to mean a literal
at-sign) share the same form and are therefore rendered as the bare character too.
"""

import re
from typing import Sequence, Tuple

from citebuilder.constants import CLOSE_BRACE, ESCAPE_MARK, OPEN_BRACE, TOKEN_MARK, VALUE_BACKSLASH

_UNESCAPED_TOKEN_MARK_RX = re.compile(r'(?<!\\)@')


class Escaper:
    """Literal ``str.replace`` based escaper for the three syntax characters."""

    def __init__(self, specials: Sequence[str] = (OPEN_BRACE, CLOSE_BRACE, TOKEN_MARK)) -> None:
        self._pairs: Tuple[Tuple[str, str], ...] = tuple((ch, ESCAPE_MARK + ch) for ch in specials)

    def escape(self, value: str) -> str:
        """Return *value* with every special character escaped."""
        value = value.replace(ESCAPE_MARK, VALUE_BACKSLASH)
        for raw, escaped in self._pairs:
            value = value.replace(raw, escaped)
        return value

    def unescape(self, text: str) -> str:
        """Reverse :meth:`escape` on *text*."""
        for raw, escaped in self._pairs:
            text = text.replace(escaped, raw)
        return text.replace(VALUE_BACKSLASH, ESCAPE_MARK)


def has_unescaped_token_marker(text: str) -> bool:
    """True if *text* still holds an ``@`` that is not preceded by a backslash."""
    return _UNESCAPED_TOKEN_MARK_RX.search(text) is not None
