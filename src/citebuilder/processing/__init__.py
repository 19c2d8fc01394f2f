"""Public API surface for citebuilder.processing."""
from citebuilder.processing.escaper import Escaper, has_unescaped_token_marker

__all__ = [
    "Escaper",
    "has_unescaped_token_marker",
]
