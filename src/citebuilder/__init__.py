from __future__ import annotations

import logging
from typing import Optional

from citebuilder.core.errors import CitationError, InvalidDataMapping, InvalidTemplate
from citebuilder.core.interfaces.templating import TemplateEngineProtocol
from citebuilder.logging.helpers import get_logger
from citebuilder.processing.escaper import Escaper
from citebuilder.parsing.segmenter import Segmenter
from citebuilder.parsing.validator import TemplateValidator
from citebuilder.rendering.builder import CitationBuilder, build_citation
from citebuilder.rendering.expander import FragmentExpander
from citebuilder.rendering.template_engine import CitationTemplateEngine
from citebuilder.runtime.config import BuildOptions

__version__ = '1.0.0'


def template_engine_factory(
    *,
    options: Optional[BuildOptions] = None,
    logger: Optional[logging.Logger] = None,
) -> TemplateEngineProtocol:
    """Factory helper that returns the default citation template engine.

    Falls back to options read from CITEBUILDER_* environment variables.
    """
    return CitationTemplateEngine(
        options=options or BuildOptions.from_env(),
        logger=logger or get_logger('templates'),
    )


__all__ = [
    'BuildOptions',
    'CitationBuilder',
    'CitationError',
    'CitationTemplateEngine',
    'Escaper',
    'FragmentExpander',
    'InvalidDataMapping',
    'InvalidTemplate',
    'Segmenter',
    'TemplateEngineProtocol',
    'TemplateValidator',
    'build_citation',
    'template_engine_factory',
]
