"""Logging helpers for citebuilder."""
from citebuilder.logging.factory import DefaultLoggerFactory
from citebuilder.logging.helpers import JsonLogFormatter, get_logger, setup_base_logger, trace

__all__ = [
    "DefaultLoggerFactory",
    "JsonLogFormatter",
    "get_logger",
    "setup_base_logger",
    "trace",
]
