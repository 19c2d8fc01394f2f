"""
builder – Citation text builder.

Takes a citation template such as::

    {@title}{, by @author}{, @co_author}{, published by @publisher{, @publication_year}}

and a mapping such as::

    {
        "title": "A Brief History of Time",
        "author": "Stephen Hawking",
        "co_author": None,
        "publisher": "Bantam",
        "publication_year": "1998",
    }

and produces::

    A Brief History of Time, by Stephen Hawking, published by Bantam, 1998

Every ``{...}`` fragment is emitted only if its ``@token`` resolves to a
non-empty value; fragments nest, so a missing inner value removes only the
inner part.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Iterator, Optional

from citebuilder.core.errors import InvalidDataMapping
from citebuilder.logging.helpers import get_logger, trace
from citebuilder.parsing.segmenter import Segmenter
from citebuilder.parsing.validator import TemplateValidator
from citebuilder.processing.escaper import Escaper, has_unescaped_token_marker
from citebuilder.rendering.expander import FragmentExpander
from citebuilder.runtime.config import BuildOptions


class CitationBuilder:
    """Validate a template once, then expand it against a data mapping.

    Construction raises :class:`~citebuilder.core.errors.InvalidTemplate` for
    an unbalanced template and :class:`~citebuilder.core.errors.InvalidDataMapping`
    when *data* is not a mapping. :meth:`build` never raises for missing data.
    """

    def __init__(
        self,
        template: str,
        data: Optional[Mapping[str, Any]] = None,
        *,
        options: Optional[BuildOptions] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._opts = options or BuildOptions()
        self._log = logger or get_logger("builder")

        validator = TemplateValidator(strict=self._opts.strict, logger=self._log)
        template = validator.normalize(template)
        validator.validate(template)

        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise InvalidDataMapping(f"invalid data mapping: expected a mapping, got {type(data).__name__}")

        self._template = template
        self._data = MappingProxyType(dict(data))
        self._escaper = Escaper()
        self._expander = FragmentExpander(
            self._data,
            options=self._opts,
            segmenter=Segmenter(),
            escaper=self._escaper,
            logger=self._log,
        )

    @property
    def template(self) -> str:
        return self._template

    @property
    def data(self) -> Mapping[str, Any]:
        return self._data

    @property
    def options(self) -> BuildOptions:
        return self._opts

    def passes(self) -> Iterator[str]:
        """Yield the (still escaped) text after every expansion pass.

        Iteration stops at the fixed point: no unescaped '@' left, or a pass
        that changed nothing. ``options.max_passes`` caps the number of passes.
        """
        citation = self._template
        count = 0
        while has_unescaped_token_marker(citation):
            if self._opts.max_passes is not None and count >= self._opts.max_passes:
                self._log.warning("stopped after %d passes with tokens left: %r", count, citation)
                return
            if self._opts.debug:
                trace(self._log, "parsing", pass_no=count + 1, text=citation)
            parsed = self._expander.parse(citation)
            count += 1
            if self._opts.debug:
                trace(self._log, "parsed", pass_no=count, text=parsed)
            if parsed == citation:
                self._log.warning("tokens outside any resolvable fragment left as-is: %r", citation)
                return
            citation = parsed
            yield citation

    def build(self) -> str:
        """Build the citation text."""
        citation = self._template
        for citation in self.passes():
            pass
        return self._escaper.unescape(citation)


def build_citation(
    template: str,
    data: Optional[Mapping[str, Any]] = None,
    *,
    options: Optional[BuildOptions] = None,
    logger: Optional[logging.Logger] = None,
) -> str:
    """Construct a :class:`CitationBuilder` and build it in one call."""
    return CitationBuilder(template, data, options=options, logger=logger).build()
