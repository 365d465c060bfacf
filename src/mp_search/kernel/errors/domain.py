"""Domain errors – invariant violations and invalid input."""

from __future__ import annotations

from typing import Any

from mp_search.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a rule the conversion layer relies on is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidArgumentError(ValidationError):
    """A required argument is absent or unusable."""

    default_code = "invalid_argument"

    def __init__(
        self,
        argument: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Argument '{argument}' must not be None", **kwargs)
        self.argument = argument


__all__ = [
    "DomainError",
    "InvalidArgumentError",
    "ValidationError",
]
