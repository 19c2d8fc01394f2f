from __future__ import annotations


class CitationError(ValueError):
    """Base class for every error raised while constructing a CitationBuilder."""


class InvalidTemplate(CitationError):
    """Raised when a citation template fails the bracket/token balance check."""


class InvalidDataMapping(CitationError, TypeError):
    """Raised when the data argument is not a mapping of key names to values."""
