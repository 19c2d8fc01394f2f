from dataclasses import dataclass
from enum import Enum


class FragmentKind(str, Enum):
    LITERAL = 'literal'
    LEAF = 'leaf'
    NESTED = 'nested'


@dataclass(frozen=True)
class Span:
    """Inclusive [start, end] range of a top-level fragment, braces included."""
    start: int
    end: int

    def slice(self, text: str) -> str:
        return text[self.start:self.end + 1]


@dataclass(frozen=True)
class Fragment:
    span: Span
    text: str
    kind: FragmentKind

    @property
    def interior(self) -> str:
        """Fragment text with its outer brace pair stripped."""
        return self.text[1:-1]
