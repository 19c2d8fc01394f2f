"""
segmenter – Locates the top-level fragments of a (partially expanded) template.

A single left-to-right scan keeps a stack of open-brace positions. Escaped
braces (preceded by a backslash) are ignored. A closing brace that leaves the
stack empty emits one top-level span; closing braces of inner levels only pop.
Spans are therefore produced in closing order, which for disjoint top-level
fragments is also their left-to-right order.
"""

import re
from typing import List

from citebuilder.constants import CLOSE_BRACE, ESCAPE_MARK, OPEN_BRACE, TOKEN_MARK
from citebuilder.core.models import Fragment, FragmentKind, Span

_UNESCAPED_OPEN_RX = re.compile(r"(?<!\\)\{")


class Segmenter:
    """Bracket-stack scanner producing top-level fragment spans."""

    def spans(self, text: str) -> List[Span]:
        """Return the inclusive spans of all top-level fragments in *text*."""
        stack: List[int] = []
        marks: List[Span] = []
        for i, ch in enumerate(text):
            if ch not in (OPEN_BRACE, CLOSE_BRACE):
                continue
            if i > 0 and text[i - 1] == ESCAPE_MARK:
                continue
            if ch == OPEN_BRACE:
                stack.append(i)
            elif len(stack) > 1:
                stack.pop()
            elif stack:
                marks.append(Span(stack.pop(), i))
            # a '}' with nothing open is left alone
        return marks

    def fragments(self, text: str) -> List[Fragment]:
        """Return the top-level fragments of *text*, classified."""
        out: List[Fragment] = []
        for span in self.spans(text):
            frag_text = span.slice(text)
            out.append(Fragment(span=span, text=frag_text, kind=self.classify(frag_text)))
        return out

    def classify(self, fragment_text: str) -> FragmentKind:
        if self.is_literal(fragment_text):
            return FragmentKind.LITERAL
        if self.is_nested(fragment_text):
            return FragmentKind.NESTED
        return FragmentKind.LEAF

    @staticmethod
    def is_literal(fragment_text: str) -> bool:
        """A fragment without any '@' (escaped or not) has nothing to expand."""
        return TOKEN_MARK not in fragment_text

    @staticmethod
    def is_nested(fragment_text: str) -> bool:
        """True if an unescaped '{' appears past the fragment's own opening brace."""
        return _UNESCAPED_OPEN_RX.search(fragment_text, 1) is not None
