"""Observability – structured logging helpers."""
from mp_search.observability.logging.factory import JsonLoggerFactory
from mp_search.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "get_logger",
]
