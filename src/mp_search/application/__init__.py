"""Application – search result conversion building blocks."""

from mp_search.application.pagination import Page, PageRequest
from mp_search.application.search import (
    FacetOptions,
    Field,
    ResponseMapper,
    ResultPage,
    SearchQuery,
)

__all__ = [
    "FacetOptions",
    "Field",
    "Page",
    "PageRequest",
    "ResponseMapper",
    "ResultPage",
    "SearchQuery",
]
