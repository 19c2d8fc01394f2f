from __future__ import annotations

"""Small logging helpers to standardize citebuilder logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'citebuilder' logger.
    - get_logger: Namespaced logger factory ('citebuilder.*').
    - trace: diagnostic records for the expansion passes, gated by the caller.

Design notes:
    - The version is resolved lazily to avoid circular imports.
    - Trace records are only emitted when the caller enables diagnostics; the
      sink is any object exposing ``debug``.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

from citebuilder.core.interfaces.logging import LoggerLikeProtocol


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'citebuilder.expand').
        - msg: Formatted message string.
        - version: citebuilder.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            from citebuilder import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return os.getenv("CITEBUILDER_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'citebuilder' logger once and return it.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger("citebuilder")
    if base.handlers:
        base.setLevel(level)
        return base

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'citebuilder'."""
    if not name or name == "citebuilder":
        return logging.getLogger("citebuilder")
    if name.startswith("citebuilder"):
        return logging.getLogger(name)
    return logging.getLogger(f"citebuilder.{name}")


def trace(logger: LoggerLikeProtocol, message: str, **ctx) -> None:
    """Emit a debug-verbosity trace record.

    Callers gate this on their own diagnostics flag.

    Args:
        logger: Target logger (any LoggerLikeProtocol sink).
        message: Human-readable description.
        **ctx: Optional structured context appended in debug format.
    """
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx)
    else:
        logger.debug("%s", message)
