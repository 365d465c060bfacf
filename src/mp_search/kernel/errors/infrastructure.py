"""Infrastructure errors – payloads handed over by external collaborators."""

from __future__ import annotations

from typing import Any

from mp_search.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure failure that is not a rule violation."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to read a decoded engine payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


__all__ = [
    "InfrastructureError",
    "SerializationError",
]
