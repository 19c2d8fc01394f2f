"""Public surface for citebuilder.core: errors, models and protocol types."""

from citebuilder.core.errors import CitationError, InvalidDataMapping, InvalidTemplate
from citebuilder.core.models import Fragment, FragmentKind, Span
from citebuilder.core.interfaces import (
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    TemplateEngineProtocol,
)

__all__ = [
    "CitationError",
    "InvalidDataMapping",
    "InvalidTemplate",
    "Fragment",
    "FragmentKind",
    "Span",
    "LoggerFactoryProtocol",
    "LoggerLikeProtocol",
    "TemplateEngineProtocol",
]
