"""Application search – convert engine responses into typed pages and entries.

All functions are pure: they read a :class:`QueryResponse` and return freshly
built values. Missing optional data (no facets requested, no facet data or
highlighting returned, empty buckets) yields empty results; only a missing
query or an unresolvable result identifier raises.
"""
from __future__ import annotations

from typing import Any, Iterable, TypeVar

from mp_search.application.pagination import Page
from mp_search.application.search.identifier import resolve_identifier
from mp_search.application.search.query import Field, SearchQuery, SupportsFacetOptions
from mp_search.application.search.response import QueryResponse
from mp_search.application.search.result import (
    FacetFieldEntry,
    FacetQueryEntry,
    HighlightEntry,
    ResultPage,
)
from mp_search.kernel.errors import InvalidArgumentError, MappingError
from mp_search.observability.logging import get_logger

T = TypeVar("T")

__all__ = [
    "ResponseMapper",
    "attach_highlights",
    "convert_facet_fields",
    "convert_facet_queries",
    "convert_highlights",
    "to_result_page",
]

_log = get_logger(__name__)


def convert_facet_fields(
    query: SupportsFacetOptions | None,
    response: QueryResponse | None,
) -> dict[Field, Page[FacetFieldEntry]]:
    """Map each field facet group of *response* to a page of entries.

    Groups without buckets still get a key with an empty page. Page totals
    come from the group's declared value count, not from the bucket window.
    Buckets beyond the requested facet page size are dropped.
    """
    _require_query(query)
    if not _has_facets(query, response):
        return {}

    result: dict[Field, Page[FacetFieldEntry]] = {}
    groups = response.facet_fields  # type: ignore[union-attr]
    if not groups:
        return result

    request = query.facet_options.page_request  # type: ignore[union-attr]
    for group in groups:
        if group is None or not _has_text(group.name):
            continue
        facet_field = Field(group.name)
        if not group.values:
            result[facet_field] = Page.empty(request)
            continue
        entries = [
            FacetFieldEntry(facet_field, bucket.name, bucket.count)
            for bucket in group.values
            if bucket is not None
        ]
        declared = group.value_count if group.value_count is not None else len(entries)
        result[facet_field] = Page(
            items=entries[: request.size],
            total=max(declared, len(entries)),
            page=request.page,
            size=request.size,
        )

    _log.debug("facet_fields_converted", fields=len(result))
    return result


def convert_facet_queries(
    query: SupportsFacetOptions | None,
    response: QueryResponse | None,
) -> list[FacetQueryEntry]:
    """Return one entry per facet query the engine reported, in engine order."""
    _require_query(query)
    if not _has_facets(query, response):
        return []

    counts = response.facet_queries  # type: ignore[union-attr]
    if not counts:
        return []
    result = [FacetQueryEntry(expression, count) for expression, count in counts.items()]

    _log.debug("facet_queries_converted", queries=len(result))
    return result


def convert_highlights(
    response: QueryResponse | None,
    page: Iterable[T] | None,
) -> list[HighlightEntry[T]]:
    """Build one highlight entry per item of *page*, in page order.

    Raises:
        IdentifierNotFoundError: an item exposes no identifier.
        IdentifierUnreadableError: an item's identifier could not be read.
    """
    if page is None or not _has_highlighting(response):
        return []

    highlighting = response.highlighting  # type: ignore[union-attr]
    entries = [_highlight_entry(highlighting, item) for item in page]

    _log.debug("highlights_converted", items=len(entries))
    return entries


def attach_highlights(
    response: QueryResponse | None,
    page: ResultPage[T] | None,
) -> ResultPage[T] | None:
    """Return a copy of *page* carrying the highlights of *response*.

    *page* itself is returned when there is nothing to attach.
    """
    if page is None or not _has_highlighting(response):
        return page
    return page.with_highlighted(convert_highlights(response, page))


def to_result_page(
    query: SearchQuery | None,
    response: QueryResponse | None,
    items: Iterable[T] | None = None,
    *,
    total: int | None = None,
) -> ResultPage[T]:
    """Assemble a :class:`ResultPage` with facets and highlights attached.

    *items* defaults to the response documents; *total* defaults to the
    response's ``num_found``, then to the number of items. Items beyond
    ``query.page_size`` are dropped.
    """
    _require_query(query)
    if items is None:
        items = getattr(response, "docs", None) or []
    page_items = list(items)[: query.page_size]
    if total is None:
        total = getattr(response, "num_found", None)
    if total is None:
        total = len(page_items)

    page: ResultPage[T] = ResultPage(
        items=page_items,
        total=max(total, len(page_items)),
        page=query.page,
        size=query.page_size,
    )
    page = page.with_facets(
        convert_facet_fields(query, response),
        convert_facet_queries(query, response),
    )
    return attach_highlights(response, page)  # type: ignore[return-value]


class ResponseMapper:
    """Stateless facade over the conversion functions of this module."""

    __slots__ = ()

    convert_facet_fields = staticmethod(convert_facet_fields)
    convert_facet_queries = staticmethod(convert_facet_queries)
    convert_highlights = staticmethod(convert_highlights)
    attach_highlights = staticmethod(attach_highlights)
    to_result_page = staticmethod(to_result_page)
    resolve_identifier = staticmethod(resolve_identifier)


def _highlight_entry(highlighting: Any, item: T) -> HighlightEntry[T]:
    entry: HighlightEntry[T] = HighlightEntry(item)
    try:
        identifier = resolve_identifier(item)
    except MappingError as exc:
        _log.warning("highlight_identifier_unresolved", **exc.to_dict())
        raise

    snippets = highlighting.get(str(identifier))
    if snippets:
        for field_name, values in snippets.items():
            entry.add_snippets(field_name, values)
    return entry


def _require_query(query: Any) -> None:
    if query is None:
        raise InvalidArgumentError("query", "Cannot convert response for 'None' query")


def _has_facets(query: SupportsFacetOptions, response: QueryResponse | None) -> bool:
    return query.has_facet_options() and response is not None


def _has_highlighting(response: QueryResponse | None) -> bool:
    return response is not None and bool(getattr(response, "highlighting", None))


def _has_text(value: str | None) -> bool:
    return value is not None and bool(value.strip())
