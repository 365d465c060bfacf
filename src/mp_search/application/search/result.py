"""Application search – typed facet, highlight and result page containers."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Generic, Iterable, Sequence, TypeVar

from mp_search.application.pagination import Page
from mp_search.application.search.query import Field

T = TypeVar("T")

__all__ = [
    "FacetFieldEntry",
    "FacetQueryEntry",
    "Highlight",
    "HighlightEntry",
    "ResultPage",
]


@dataclass(frozen=True)
class FacetFieldEntry:
    """One bucket of a field facet: ``value`` occurred ``count`` times in ``field``."""
    field: Field
    value: str | None
    count: int

    @property
    def key(self) -> Field:
        return self.field


@dataclass(frozen=True)
class FacetQueryEntry:
    """Number of matches for one facet query expression."""
    query: str
    count: int

    @property
    def value(self) -> str:
        return self.query


@dataclass(frozen=True)
class Highlight:
    field: str
    snippets: tuple[str, ...]


@dataclass
class HighlightEntry(Generic[T]):
    """Highlighted snippets for one result item, keyed by field name.

    Items without any snippets still get an entry with an empty mapping.
    """
    item: T
    snippets: dict[str, list[str]] = field(default_factory=dict)

    def add_snippets(self, field_name: str, snippets: Iterable[str] | None) -> None:
        self.snippets.setdefault(field_name, []).extend(snippets or ())

    def get_snippets(self, field_name: str) -> list[str]:
        return list(self.snippets.get(field_name, ()))

    @property
    def highlights(self) -> list[Highlight]:
        return [Highlight(name, tuple(values)) for name, values in self.snippets.items()]


@dataclass(frozen=True)
class ResultPage(Page[T]):
    """A page of result items plus the facets and highlights of the same response.

    Instances are immutable; attaching highlights or facets returns a copy.
    ``highlighted`` is ``None`` until highlights have been attached.
    """
    highlighted: list[HighlightEntry[T]] | None = None
    facet_field_pages: dict[Field, Page[FacetFieldEntry]] = field(default_factory=dict)
    facet_query_result: list[FacetQueryEntry] = field(default_factory=list)

    def with_highlighted(self, entries: Sequence[HighlightEntry[T]]) -> "ResultPage[T]":
        return dataclasses.replace(self, highlighted=list(entries))

    def with_facets(
        self,
        field_pages: dict[Field, Page[FacetFieldEntry]],
        query_result: Sequence[FacetQueryEntry] = (),
    ) -> "ResultPage[T]":
        return dataclasses.replace(
            self,
            facet_field_pages=dict(field_pages),
            facet_query_result=list(query_result),
        )

    @property
    def facet_fields(self) -> list[Field]:
        return list(self.facet_field_pages)

    def get_facet_result_page(self, facet_field: Field | str) -> Page[FacetFieldEntry]:
        key = facet_field if isinstance(facet_field, Field) else Field(facet_field)
        page = self.facet_field_pages.get(key)
        if page is None:
            return Page(items=[], total=0, page=1, size=0)
        return page

    def get_highlights(self, item: T) -> dict[str, list[str]]:
        """Return the snippets attached to *item*, or an empty mapping.

        The entry holding *item* itself wins over one holding an equal item.
        """
        entries = self.highlighted or ()
        for entry in entries:
            if entry.item is item:
                return dict(entry.snippets)
        for entry in entries:
            if entry.item == item:
                return dict(entry.snippets)
        return {}
