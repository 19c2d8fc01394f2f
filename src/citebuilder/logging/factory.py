from __future__ import annotations

import logging
from typing import Optional, TextIO

from citebuilder.logging.helpers import setup_base_logger, get_logger
from citebuilder.runtime.config import BuildOptions


class DefaultLoggerFactory:
    """Hands out 'citebuilder.*' loggers sized to a set of BuildOptions.

    The base handler is installed lazily on the first request. Builders run
    with ``options.debug`` emit their pass traces at DEBUG, so the base level
    follows that flag unless an explicit *level* is given.
    """

    def __init__(
        self,
        *,
        json_logs: bool = False,
        level: Optional[int] = None,
        stream: Optional[TextIO] = None,
        options: Optional[BuildOptions] = None,
    ) -> None:
        self._options = options or BuildOptions()
        self._json = bool(json_logs)
        if level is None:
            level = logging.DEBUG if self._options.debug else logging.INFO
        self._level = int(level)
        self._stream = stream
        self._base: Optional[logging.Logger] = None

    @classmethod
    def from_options(cls, options: BuildOptions, *, json_logs: bool = False) -> 'DefaultLoggerFactory':
        return cls(json_logs=json_logs, options=options)

    @property
    def level(self) -> int:
        return self._level

    def get_logger(self, name: str) -> logging.Logger:
        if self._base is None:
            self._base = setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
        return get_logger(name)

    def trace_sink(self) -> logging.Logger:
        """Logger that CitationBuilder instances write their pass traces to."""
        return self.get_logger('builder')
