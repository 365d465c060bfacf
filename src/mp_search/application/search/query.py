"""Application search – query value objects and facet options."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from mp_search.application.pagination import PageRequest
from mp_search.kernel.errors import ValidationError

if TYPE_CHECKING:
    from mp_search.config.settings import SearchSettings

__all__ = [
    "FacetOptions",
    "FacetSort",
    "Field",
    "SearchQuery",
    "SupportsFacetOptions",
]

DEFAULT_FACET_PAGE_SIZE = 10


@dataclass(frozen=True)
class Field:
    """A named search attribute; identity is the case-sensitive name."""
    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationError("Field name must not be empty")

    def __str__(self) -> str:
        return self.name


class FacetSort(str, Enum):
    COUNT = "count"
    INDEX = "index"


@dataclass(frozen=True)
class FacetOptions:
    """Facet fields and facet queries requested alongside a search.

    ``page_request`` bounds the bucket window per field (the engine's facet
    limit/offset). ``min_count`` and ``sort`` are request parameters for the
    engine; converted responses keep the buckets the engine returned as-is.
    """
    fields: tuple[Field, ...] = ()
    queries: tuple[str, ...] = ()
    page_request: PageRequest = field(default_factory=lambda: PageRequest(size=DEFAULT_FACET_PAGE_SIZE))
    min_count: int = 1
    sort: FacetSort = FacetSort.COUNT

    def __post_init__(self) -> None:
        normalized = tuple(f if isinstance(f, Field) else Field(f) for f in self.fields)
        object.__setattr__(self, "fields", normalized)
        object.__setattr__(self, "queries", tuple(self.queries))
        if self.min_count < 0:
            raise ValidationError("min_count must be >= 0")

    @property
    def has_fields(self) -> bool:
        return bool(self.fields)

    @property
    def has_queries(self) -> bool:
        return bool(self.queries)

    @property
    def has_facets(self) -> bool:
        return self.has_fields or self.has_queries

    @classmethod
    def from_settings(
        cls,
        settings: "SearchSettings",
        *,
        fields: tuple[Field | str, ...] = (),
        queries: tuple[str, ...] = (),
        page: int = 1,
        sort: FacetSort = FacetSort.COUNT,
    ) -> "FacetOptions":
        """Build options using the configured facet page size and minimum count."""
        return cls(
            fields=fields,  # type: ignore[arg-type]
            queries=queries,
            page_request=PageRequest(page=page, size=settings.facet_page_size),
            min_count=settings.facet_min_count,
            sort=sort,
        )


@runtime_checkable
class SupportsFacetOptions(Protocol):
    """Anything exposing facet options the response mapper can read."""

    facet_options: FacetOptions | None

    def has_facet_options(self) -> bool: ...


@dataclass
class SearchQuery:
    page: int = 1
    page_size: int = 20
    facet_options: FacetOptions | None = None

    def has_facet_options(self) -> bool:
        return self.facet_options is not None and self.facet_options.has_facets
