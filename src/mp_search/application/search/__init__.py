"""Application search – typed conversion of engine query responses."""
from mp_search.application.search.identifier import (
    HasIdentifier,
    Id,
    id_field,
    register_identifier,
    resolve_identifier,
    unregister_identifier,
)
from mp_search.application.search.mapper import (
    ResponseMapper,
    attach_highlights,
    convert_facet_fields,
    convert_facet_queries,
    convert_highlights,
    to_result_page,
)
from mp_search.application.search.query import (
    FacetOptions,
    FacetSort,
    Field,
    SearchQuery,
    SupportsFacetOptions,
)
from mp_search.application.search.response import (
    Count,
    FacetField,
    QueryResponse,
    SimpleQueryResponse,
)
from mp_search.application.search.result import (
    FacetFieldEntry,
    FacetQueryEntry,
    Highlight,
    HighlightEntry,
    ResultPage,
)

__all__ = [
    "Count",
    "FacetField",
    "FacetFieldEntry",
    "FacetOptions",
    "FacetQueryEntry",
    "FacetSort",
    "Field",
    "HasIdentifier",
    "Highlight",
    "HighlightEntry",
    "Id",
    "QueryResponse",
    "ResponseMapper",
    "ResultPage",
    "SearchQuery",
    "SimpleQueryResponse",
    "SupportsFacetOptions",
    "attach_highlights",
    "convert_facet_fields",
    "convert_facet_queries",
    "convert_highlights",
    "id_field",
    "register_identifier",
    "resolve_identifier",
    "to_result_page",
    "unregister_identifier",
]
