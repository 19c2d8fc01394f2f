"""
expander – One expansion pass over a (partially expanded) citation template.

Each pass resolves the outermost unresolved layer of every top-level fragment:

  • literal fragments (no '@') are left untouched;
  • nested fragments recurse into their interior and keep their own braces;
  • leaf fragments substitute their token with the escaped mapping value,
    or vanish entirely when the value is falsy.

Fragments are de-duplicated by text and replaced by text across the whole
string, so byte-identical fragments at different positions always resolve
together.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Mapping, Optional

from citebuilder.constants import CLOSE_BRACE, COMBO_JOINER, OPEN_BRACE
from citebuilder.core.models import FragmentKind
from citebuilder.logging.helpers import get_logger, trace
from citebuilder.parsing.segmenter import Segmenter
from citebuilder.processing.escaper import Escaper
from citebuilder.runtime.config import BuildOptions

_TOKEN_RX = re.compile(r"(?<!\\)@(?P<key>[\w+]+)")


def is_truthy(value: Any) -> bool:
    if value is None or value is False:
        return False
    if value == "":
        return False
    if isinstance(value, (list, tuple, dict)) and len(value) == 0:
        return False
    return True


class FragmentExpander:
    """Resolves fragments against a read-only data mapping."""

    def __init__(
        self,
        data: Mapping[str, Any],
        *,
        options: Optional[BuildOptions] = None,
        segmenter: Optional[Segmenter] = None,
        escaper: Optional[Escaper] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._data = data
        self._opts = options or BuildOptions()
        self._segmenter = segmenter or Segmenter()
        self._escaper = escaper or Escaper()
        self._log = logger or get_logger("expand")

    def parse(self, text: str) -> str:
        """Run a single expansion pass over *text* and return the result."""
        solved: Dict[str, str] = {}
        for fragment in self._segmenter.fragments(text):
            if fragment.text in solved or fragment.kind is FragmentKind.LITERAL:
                continue
            if fragment.kind is FragmentKind.NESTED:
                solved[fragment.text] = OPEN_BRACE + self.parse(fragment.interior) + CLOSE_BRACE
            else:
                solved[fragment.text] = self.expand(fragment.interior)

        for raw, resolved in solved.items():
            text = text.replace(raw, resolved)
        return text

    def expand(self, segment: str) -> str:
        """Resolve the token of a leaf fragment interior (braces already stripped)."""
        if self._opts.debug:
            trace(self._log, "segment", segment=segment)

        match = _TOKEN_RX.search(segment)
        if match is None:
            # Nothing but escaped markers left; keep the text as resolved literal.
            return segment

        key = match.group("key")
        value = self.resolve(key)
        if value:
            return segment[:match.start()] + self._escaper.escape(value) + segment[match.end():]

        if self._opts.debug:
            trace(self._log, "unresolved token", key=key)
            return segment[:match.start()] + self._opts.placeholder.format(key=key) + segment[match.end():]

        return ""

    def resolve(self, key: str) -> str:
        """Return the rendered value for *key*, or "" when it is falsy.

        Combo keys (``A+B+C``) join every truthy member in listed order.
        """
        if COMBO_JOINER in key:
            parts = [self.lookup(k) for k in key.split(COMBO_JOINER) if k]
            return self._opts.combo_separator.join(p for p in parts if p)
        return self.lookup(key)

    def lookup(self, key: str) -> str:
        value = self._data.get(key)
        if not is_truthy(value):
            return ""
        return value if isinstance(value, str) else str(value)
