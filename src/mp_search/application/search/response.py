"""Application search – engine response shapes consumed by the mapper.

:class:`QueryResponse` is the structural contract; :class:`SimpleQueryResponse`
is an in-memory implementation that can be read from an already decoded Solr
``/select`` body via :meth:`SimpleQueryResponse.from_solr`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

from mp_search.kernel.errors import SerializationError

__all__ = [
    "Count",
    "FacetField",
    "QueryResponse",
    "SimpleQueryResponse",
]

Highlighting = Mapping[str, Mapping[str, Sequence[str]]]


@dataclass(frozen=True)
class Count:
    """One facet bucket as reported by the engine."""
    name: str | None
    count: int


@dataclass
class FacetField:
    """A field facet group.

    ``value_count`` is the number of distinct values the engine declares for
    the field; it defaults to the number of buckets returned.
    """
    name: str | None
    values: list[Count | None] = field(default_factory=list)
    value_count: int | None = None

    def __post_init__(self) -> None:
        if self.value_count is None:
            self.value_count = len(self.values)


@runtime_checkable
class QueryResponse(Protocol):
    facet_fields: Sequence[FacetField | None] | None
    facet_queries: Mapping[str, int] | None
    highlighting: Highlighting | None


@dataclass
class SimpleQueryResponse:
    facet_fields: list[FacetField | None] = field(default_factory=list)
    facet_queries: dict[str, int] = field(default_factory=dict)
    highlighting: dict[str, dict[str, list[str]]] = field(default_factory=dict)
    docs: list[dict[str, Any]] = field(default_factory=list)
    num_found: int | None = None

    @classmethod
    def from_solr(cls, raw: Mapping[str, Any]) -> "SimpleQueryResponse":
        """Read a decoded Solr JSON response body.

        Facet fields may use any ``json.nl`` layout: ``flat``
        (``[label, count, ...]``), ``arrarr`` (``[[label, count], ...]``) or
        ``map`` (``{label: count}``).
        """
        facet_counts = raw.get("facet_counts") or {}
        facet_fields = [
            _parse_facet_field(name, values)
            for name, values in (facet_counts.get("facet_fields") or {}).items()
        ]
        facet_queries = {
            str(expression): _as_count(count, f"facet_queries[{expression!r}]")
            for expression, count in (facet_counts.get("facet_queries") or {}).items()
        }
        highlighting = {
            str(key): _parse_snippets(key, fields)
            for key, fields in (raw.get("highlighting") or {}).items()
        }
        body = raw.get("response") or {}
        num_found = body.get("numFound")
        return cls(
            facet_fields=facet_fields,  # type: ignore[arg-type]
            facet_queries=facet_queries,
            highlighting=highlighting,
            docs=list(body.get("docs") or []),
            num_found=None if num_found is None else _as_count(num_found, "response.numFound"),
        )


def _as_count(value: Any, where: str) -> int:
    if isinstance(value, bool):
        raise SerializationError(f"{where}: expected an integer count, got {value!r}", payload_type="solr")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    raise SerializationError(f"{where}: expected an integer count, got {value!r}", payload_type="solr")


def _parse_facet_field(name: str, values: Any) -> FacetField:
    where = f"facet_fields[{name!r}]"
    buckets: list[Count | None] = []
    if isinstance(values, Mapping):
        buckets = [Count(label, _as_count(count, where)) for label, count in values.items()]
    elif isinstance(values, (list, tuple)):
        if values and all(isinstance(v, (list, tuple)) for v in values):
            for pair in values:
                if len(pair) != 2:
                    raise SerializationError(f"{where}: expected [label, count] pairs", payload_type="solr")
                buckets.append(Count(pair[0], _as_count(pair[1], where)))
        else:
            if len(values) % 2:
                raise SerializationError(f"{where}: odd number of flat entries", payload_type="solr")
            for label, count in zip(values[::2], values[1::2]):
                buckets.append(Count(label, _as_count(count, where)))
    elif values is not None:
        raise SerializationError(f"{where}: unsupported layout {type(values).__name__}", payload_type="solr")
    return FacetField(name=name, values=buckets, value_count=len(buckets))


def _parse_snippets(key: Any, fields: Any) -> dict[str, list[str]]:
    if fields is None:
        return {}
    if not isinstance(fields, Mapping):
        raise SerializationError(f"highlighting[{key!r}]: expected an object", payload_type="solr")
    snippets: dict[str, list[str]] = {}
    for name, values in fields.items():
        if isinstance(values, str):
            snippets[name] = [values]
        else:
            snippets[name] = list(values or [])
    return snippets
