"""Application search – resolve the document identifier of a result item.

Highlighting snippets are keyed by document id, so every result item must
expose one. Resolution order, first match wins:

1. an extractor registered for the item's type (or nearest base class) with
   :func:`register_identifier`;
2. a member literally named ``id`` (attribute, field, slot, property, a
   zero-argument ``id()`` method, or the ``"id"`` key of a mapping);
3. the first field, in declaration order with inherited fields first, marked
   as identifier via ``Annotated[..., Id]`` or :func:`id_field`. Annotations
   that cannot be evaluated (names imported only under ``TYPE_CHECKING``)
   are skipped unless they spell out the marker.

Usage::

    @dataclass
    class Book:
        isbn: Annotated[str, Id]
        title: str

    resolve_identifier(Book("978-0", "Dune"))  # "978-0"
"""
from __future__ import annotations

import dataclasses
import functools
import inspect
import re
import sys
import threading
import typing
from typing import Annotated, Any, Callable, Mapping, Protocol, runtime_checkable

from mp_search.kernel.errors import IdentifierNotFoundError, IdentifierUnreadableError

__all__ = [
    "ID_ATTRIBUTE",
    "IDENTIFIER_METADATA_KEY",
    "HasIdentifier",
    "Id",
    "id_field",
    "register_identifier",
    "resolve_identifier",
    "unregister_identifier",
]

ID_ATTRIBUTE = "id"
IDENTIFIER_METADATA_KEY = "identifier"

IdentifierExtractor = Callable[[Any], Any]


class Id:
    """Marker for the field holding a document's identifier.

    Use either the class or an instance: ``Annotated[str, Id]`` or
    ``Annotated[str, Id()]``.
    """

    def __repr__(self) -> str:
        return "Id()"


@runtime_checkable
class HasIdentifier(Protocol):
    id: Any


def id_field(**kwargs: Any) -> Any:
    """``dataclasses.field`` that marks the field as the identifier."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[IDENTIFIER_METADATA_KEY] = True
    return dataclasses.field(metadata=metadata, **kwargs)


_extractors: dict[type, IdentifierExtractor] = {}
_lock = threading.Lock()


def register_identifier(cls: type, extractor: IdentifierExtractor) -> None:
    """Use *extractor* for instances of *cls* and its subclasses."""
    with _lock:
        _extractors[cls] = extractor


def unregister_identifier(cls: type) -> None:
    with _lock:
        _extractors.pop(cls, None)


def resolve_identifier(obj: Any) -> Any:
    """Return the identifier value of *obj*.

    Raises:
        IdentifierNotFoundError: no registered extractor, ``id`` member or
            marked field exists.
        IdentifierUnreadableError: an identifier member exists but reading it
            failed.
    """
    cls = type(obj)
    type_name = cls.__qualname__

    extractor = _lookup_extractor(cls)
    if extractor is not None:
        try:
            return extractor(obj)
        except Exception as exc:
            raise IdentifierUnreadableError(type_name, cause=exc) from exc

    if isinstance(obj, Mapping):
        if ID_ATTRIBUTE in obj:
            return obj[ID_ATTRIBUTE]
        raise IdentifierNotFoundError(type_name)

    if _declares_id(obj):
        return _read_id(obj)

    marked = _marked_field(cls)
    if marked is not None:
        return _read(obj, marked)

    raise IdentifierNotFoundError(type_name)


def _lookup_extractor(cls: type) -> IdentifierExtractor | None:
    for klass in cls.__mro__:
        extractor = _extractors.get(klass)
        if extractor is not None:
            return extractor
    return None


def _declares_id(obj: Any) -> bool:
    if ID_ATTRIBUTE in getattr(obj, "__dict__", {}):
        return True
    for klass in type(obj).__mro__:
        if klass is object:
            continue
        if ID_ATTRIBUTE in vars(klass) or ID_ATTRIBUTE in _own_annotations(klass):
            return True
    return False


def _read_id(obj: Any) -> Any:
    value = _read(obj, ID_ATTRIBUTE)
    if not inspect.ismethod(value) or ID_ATTRIBUTE in getattr(obj, "__dict__", {}):
        return value
    # accessor method: def id(self)
    try:
        return value()
    except Exception as exc:
        raise IdentifierUnreadableError(type(obj).__qualname__, ID_ATTRIBUTE, cause=exc) from exc


def _read(obj: Any, attribute: str) -> Any:
    try:
        return getattr(obj, attribute)
    except Exception as exc:
        raise IdentifierUnreadableError(type(obj).__qualname__, attribute, cause=exc) from exc


if sys.version_info >= (3, 14):

    def _own_annotations(klass: type) -> dict[str, Any]:
        return inspect.get_annotations(klass, format=inspect.Format.FORWARDREF)

else:

    def _own_annotations(klass: type) -> dict[str, Any]:
        return inspect.get_annotations(klass)


@functools.lru_cache(maxsize=256)
def _marked_field(cls: type) -> str | None:
    metadata: dict[str, Mapping[str, Any]] = {}
    if dataclasses.is_dataclass(cls):
        metadata = {f.name: f.metadata for f in dataclasses.fields(cls)}

    # inherited first, redefinitions keep the base position
    annotations: dict[str, tuple[type, Any]] = {}
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        for name, annotation in _own_annotations(klass).items():
            annotations[name] = (klass, annotation)

    unresolved: list[str] = []
    for name, (klass, annotation) in annotations.items():
        if metadata.get(name, {}).get(IDENTIFIER_METADATA_KEY):
            return name
        marked = _annotation_marked(klass, annotation)
        if marked is None:
            unresolved.append(name)
        elif marked:
            return name

    if unresolved:
        raise IdentifierUnreadableError(
            cls.__qualname__,
            cause=NameError(f"unresolved annotations: {', '.join(unresolved)}"),
        )
    return None


def _annotation_marked(klass: type, annotation: Any) -> bool | None:
    """Whether *annotation* carries the ``Id`` marker; ``None`` if undecidable."""
    if isinstance(annotation, typing.ForwardRef):
        annotation = annotation.__forward_arg__
    if not isinstance(annotation, str):
        return _is_marked(annotation)

    module = sys.modules.get(klass.__module__)
    globalns = vars(module) if module is not None else {}
    try:
        return _is_marked(eval(annotation, globalns, dict(vars(klass))))
    except Exception:
        if _MARKED_SOURCE.match(annotation):
            return True
        return None


_MARKED_SOURCE = re.compile(r"^\s*(?:[\w.]+\.)?Annotated\[.+,\s*(?:[\w.]+\.)?Id(?:\(\s*\))?\s*(?:,.*)?\]\s*$", re.S)


def _is_marked(hint: Any) -> bool:
    if typing.get_origin(hint) is not Annotated:
        return False
    return any(m is Id or isinstance(m, Id) for m in hint.__metadata__)
