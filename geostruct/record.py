from __future__ import annotations

from collections.abc import Mapping
from typing import AbstractSet, Any, Protocol, runtime_checkable

from msgspec import Struct

__all__ = ("Record", "MappingRecord", "StructRecord", "as_record")


def __dir__():
    return __all__


@runtime_checkable
class Record(Protocol):
    """A record whose fields can be looked up by name.

    Concrete storage formats provide their own adapters; the decoder only ever
    asks for the set of field names and for the value of a named field.
    """

    def field_names(self) -> AbstractSet[str]: ...

    def value_of(self, name: str) -> Any: ...


class MappingRecord:
    """A `Record` backed by a mapping (e.g. a ``dict`` parsed from JSON).

    Missing fields read as ``None``.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]):
        if not isinstance(data, Mapping):
            raise TypeError(f"Expected a mapping, got `{type(data).__name__}`")
        self._data = data

    def __repr__(self):
        return f"MappingRecord({self._data!r})"

    def field_names(self) -> AbstractSet[str]:
        return self._data.keys()

    def value_of(self, name: str) -> Any:
        return self._data.get(name)


class StructRecord:
    """A `Record` backed by a `msgspec.Struct` instance.

    Field names are the names as seen by Python code, not any renamed
    ``encode_name``.
    """

    __slots__ = ("_obj",)

    def __init__(self, obj: Struct):
        if not isinstance(obj, Struct):
            raise TypeError(f"Expected a Struct, got `{type(obj).__name__}`")
        self._obj = obj

    def __repr__(self):
        return f"StructRecord({self._obj!r})"

    def field_names(self) -> AbstractSet[str]:
        return frozenset(self._obj.__struct_fields__)

    def value_of(self, name: str) -> Any:
        if name not in self._obj.__struct_fields__:
            return None
        return getattr(self._obj, name)


def as_record(obj: Any) -> Record:
    """Wrap ``obj`` in the matching `Record` adapter.

    Objects that already implement `Record` are returned unchanged.
    """
    if isinstance(obj, (MappingRecord, StructRecord)):
        return obj
    if isinstance(obj, Struct):
        return StructRecord(obj)
    if isinstance(obj, Mapping):
        return MappingRecord(obj)
    if isinstance(obj, Record):
        return obj
    raise TypeError(f"Can't read a record from `{type(obj).__name__}`")
