"""Mapping errors – result objects that cannot be correlated with documents."""

from __future__ import annotations

from typing import Any

from mp_search.kernel.errors.domain import DomainError


class MappingError(DomainError):
    """A result object could not be mapped onto its search document."""

    default_code = "mapping_error"

    def __init__(
        self,
        message: str,
        *,
        type_name: str | None = None,
        attribute: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.type_name = type_name
        self.attribute = attribute
        if type_name is not None:
            self.detail.setdefault("type", type_name)
        if attribute is not None:
            self.detail.setdefault("attribute", attribute)


class IdentifierNotFoundError(MappingError):
    """Neither an ``id`` member nor an ``Id``-marked field exists."""

    default_code = "identifier_not_found"

    def __init__(self, type_name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Id property could not be found on '{type_name}'",
            type_name=type_name,
            **kwargs,
        )


class IdentifierUnreadableError(MappingError):
    """An identifier member exists but reading it failed."""

    default_code = "identifier_unreadable"

    def __init__(self, type_name: str, attribute: str | None = None, **kwargs: Any) -> None:
        target = f"'{type_name}.{attribute}'" if attribute else f"'{type_name}'"
        super().__init__(
            f"Id property {target} could not be accessed",
            type_name=type_name,
            attribute=attribute,
            **kwargs,
        )


__all__ = [
    "IdentifierNotFoundError",
    "IdentifierUnreadableError",
    "MappingError",
]
