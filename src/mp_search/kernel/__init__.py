"""Kernel – framework-agnostic building blocks."""

from mp_search.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    IdentifierNotFoundError,
    IdentifierUnreadableError,
    InfrastructureError,
    InvalidArgumentError,
    MappingError,
    SerializationError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "IdentifierNotFoundError",
    "IdentifierUnreadableError",
    "InfrastructureError",
    "InvalidArgumentError",
    "MappingError",
    "SerializationError",
    "ValidationError",
]
