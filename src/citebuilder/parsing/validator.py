from __future__ import annotations

import logging
import re
from typing import List, Optional

from citebuilder.constants import CLOSE_BRACE, ESCAPE_MARK, OPEN_BRACE, TOKEN_MARK
from citebuilder.core.errors import InvalidTemplate

_OPEN_RX = re.compile(r"(?<!\\)\{")
_CLOSE_RX = re.compile(r"(?<!\\)\}")
_TOKEN_RX = re.compile(r"(?<!\\)@\w+")


class TemplateValidator:
    """Structural checks run once, before a template is ever parsed.

    The default check is deliberately coarse: unescaped ``{`` and ``}`` counts
    must agree, and must equal the number of unescaped ``@token`` markers.
    Interleaved pairs such as ``}{@a}{@b`` still pass it. ``strict=True``
    adds a real bracket matcher on top.
    """

    def __init__(self, *, strict: bool = False, logger: Optional[logging.Logger] = None) -> None:
        self._strict = bool(strict)
        self._log = logger or logging.getLogger("citebuilder.validator")

    @staticmethod
    def normalize(template: str) -> str:
        """Fold a multi-line template into a single line."""
        return template.replace("\r", "").replace("\n", "")

    def validate(self, template: str) -> None:
        """Raise :class:`InvalidTemplate` if *template* is not balanced."""
        n_open = len(_OPEN_RX.findall(template))
        n_close = len(_CLOSE_RX.findall(template))
        n_tokens = len(_TOKEN_RX.findall(template))
        if n_open != n_close or n_open != n_tokens:
            raise InvalidTemplate(
                f"invalid template syntax: {n_open} '{{', {n_close} '}}' and {n_tokens} tokens "
                "(all three counts must match)"
            )
        if self._strict:
            self._check_nesting(template)

    def _check_nesting(self, template: str) -> None:
        stack: List[int] = []
        # Per open fragment: does its own level (not a child's) hold a token?
        owns_token: List[bool] = []
        for i, ch in enumerate(template):
            if i > 0 and template[i - 1] == ESCAPE_MARK:
                continue
            if ch == OPEN_BRACE:
                stack.append(i)
                owns_token.append(False)
            elif ch == CLOSE_BRACE:
                if not stack:
                    raise InvalidTemplate(f"unmatched '}}' at column {i}")
                start = stack.pop()
                if not owns_token.pop():
                    raise InvalidTemplate(f"fragment at column {start} holds no token of its own")
            elif ch == TOKEN_MARK and _TOKEN_RX.match(template, i):
                if not stack:
                    raise InvalidTemplate(f"token at column {i} is outside every fragment")
                owns_token[-1] = True
        if stack:
            raise InvalidTemplate(f"unclosed '{{' at column {stack[-1]}")
        self._log.debug("strict bracket check passed for %r", template)
