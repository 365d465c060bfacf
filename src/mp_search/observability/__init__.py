"""Observability – structured logging."""

from mp_search.observability.logging import JsonLoggerFactory, get_logger

__all__ = [
    "JsonLoggerFactory",
    "get_logger",
]
