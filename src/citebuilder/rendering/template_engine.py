"""
template_engine – Concrete TemplateEngineProtocol implementation for citebuilder.

Wraps :class:`CitationBuilder` behind the Protocol-based ``render`` surface so
callers that format many records with one template can share options and a
logger.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional

from citebuilder.core.interfaces.templating import TemplateEngineProtocol
from citebuilder.logging.helpers import get_logger
from citebuilder.rendering.builder import CitationBuilder
from citebuilder.runtime.config import BuildOptions


class CitationTemplateEngine(TemplateEngineProtocol):
    """Fragment-gated citation template engine.

    Unlike a plain interpolator, construction errors (unbalanced template,
    non-mapping data) propagate to the caller.
    """

    def __init__(
        self,
        *,
        options: Optional[BuildOptions] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._opts = options or BuildOptions()
        self._log = logger or get_logger("templates")

    @property
    def options(self) -> BuildOptions:
        return self._opts

    def render(self, template: str, variables: Mapping[str, Optional[Any]]) -> str:
        """Render *template* gating every fragment on *variables*."""
        return CitationBuilder(template, variables, options=self._opts, logger=self._log).build()

    def render_many(self, template: str, records: Iterable[Mapping[str, Optional[Any]]]) -> List[str]:
        """Render *template* once per record, in order."""
        return [self.render(template, record) for record in records]
