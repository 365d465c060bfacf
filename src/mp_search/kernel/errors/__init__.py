"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── ValidationError
    │   │   └── InvalidArgumentError
    │   └── MappingError         (mapping.py)
    │       ├── IdentifierNotFoundError
    │       └── IdentifierUnreadableError
    ├── ApplicationError         (application.py)
    └── InfrastructureError      (infrastructure.py)
        └── SerializationError
"""

from mp_search.kernel.errors.application import ApplicationError
from mp_search.kernel.errors.base import BaseError
from mp_search.kernel.errors.domain import (
    DomainError,
    InvalidArgumentError,
    ValidationError,
)
from mp_search.kernel.errors.infrastructure import InfrastructureError, SerializationError
from mp_search.kernel.errors.mapping import (
    IdentifierNotFoundError,
    IdentifierUnreadableError,
    MappingError,
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
