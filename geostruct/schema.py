from __future__ import annotations

from typing import Any, ClassVar, Tuple, Union

import msgspec.inspect as mi
from msgspec import Struct

from ._errors import InvalidSchema

__all__ = (
    "Type",
    "AnyType",
    "PrimitiveType",
    "ListType",
    "MapType",
    "StructType",
    "UnionType",
    "FieldInfo",
    "RecordSchema",
    "schema_info",
    "is_eligible",
    "check_schema",
)


def __dir__():
    return __all__


class Type(Struct, frozen=True):
    """The base type descriptor."""

    category: ClassVar[str]


class AnyType(Type, frozen=True):
    """A field of unknown or unconstrained type."""

    category: ClassVar[str] = "any"


class PrimitiveType(Type, frozen=True):
    """A scalar field.

    Parameters
    ----------
    kind: str
        The primitive kind. One of ``"string"``, ``"binary"``, ``"boolean"``,
        ``"int"``, ``"double"``, ``"decimal"``, ``"timestamp"``, ``"date"``,
        ``"time"``, ``"interval"``, ``"uuid"``, or ``"void"``.
    """

    category: ClassVar[str] = "primitive"

    kind: str


class ListType(Type, frozen=True):
    """A list field.

    Parameters
    ----------
    item_type: Type
        The element type.
    """

    category: ClassVar[str] = "list"

    item_type: Type = AnyType()


class MapType(Type, frozen=True):
    """A map field.

    Parameters
    ----------
    key_type: Type
        The key type.
    value_type: Type
        The value type.
    """

    category: ClassVar[str] = "map"

    key_type: Type = AnyType()
    value_type: Type = AnyType()


class FieldInfo(Struct, frozen=True):
    """A named field in a record schema.

    Parameters
    ----------
    name: str
        The field name.
    type: Type
        The field type.
    """

    name: str
    type: Type


class StructType(Type, frozen=True):
    """A nested record field.

    Parameters
    ----------
    fields: Tuple[FieldInfo, ...]
        The fields of the nested record. Empty for a recursive reference to
        an enclosing record type.
    """

    category: ClassVar[str] = "struct"

    fields: Tuple[FieldInfo, ...] = ()


class UnionType(Type, frozen=True):
    """A field that may hold one of several types.

    Parameters
    ----------
    types: Tuple[Type, ...]
        The possible types.
    """

    category: ClassVar[str] = "union"

    types: Tuple[Type, ...]


class RecordSchema(Struct, frozen=True):
    """The declared field layout of a record.

    Parameters
    ----------
    fields: Tuple[FieldInfo, ...]
        The fields, in declaration order.
    """

    fields: Tuple[FieldInfo, ...]

    @classmethod
    def of(cls, **fields: Type) -> "RecordSchema":
        """Create a schema from keyword arguments mapping names to types.

        Examples
        --------
        >>> RecordSchema.of(type=PrimitiveType("string"), coordinates=ListType())
        """
        return cls(tuple(FieldInfo(k, v) for k, v in fields.items()))

    def __len__(self):
        return len(self.fields)

    def field_names(self) -> frozenset:
        return frozenset(f.name for f in self.fields)

    def field_type(self, name: str) -> Union[Type, None]:
        """The type of the field ``name``, or ``None`` if there is no such
        field."""
        for f in self.fields:
            if f.name == name:
                return f.type
        return None


_PRIMITIVE_KINDS = {
    mi.StrType: "string",
    mi.BytesType: "binary",
    mi.ByteArrayType: "binary",
    mi.ExtType: "binary",
    mi.BoolType: "boolean",
    mi.IntType: "int",
    mi.FloatType: "double",
    mi.DecimalType: "decimal",
    mi.DateTimeType: "timestamp",
    mi.DateType: "date",
    mi.TimeType: "time",
    mi.TimeDeltaType: "interval",
    mi.UUIDType: "uuid",
    mi.NoneType: "void",
}

_ARRAY_TYPES = (mi.ListType, mi.VarTupleType, mi.SetType, mi.FrozenSetType)

_OBJECT_TYPES = (mi.StructType, mi.DataclassType, mi.TypedDictType, mi.NamedTupleType)


def _literal_kind(values):
    if all(isinstance(v, str) for v in values):
        return "string"
    return "int"


def _convert_fields(t, seen):
    # TypedDictType has no `cls`
    cls = getattr(t, "cls", None)
    if cls is not None:
        if cls in seen:
            # Recursive reference to an enclosing record type
            return ()
        seen = seen | {cls}
    return tuple(FieldInfo(f.name, _convert(f.type, seen)) for f in t.fields)


def _convert(t: mi.Type, seen: frozenset) -> Type:
    if isinstance(t, mi.Metadata):
        return _convert(t.type, seen)

    kind = _PRIMITIVE_KINDS.get(type(t))
    if kind is not None:
        return PrimitiveType(kind)

    if isinstance(t, mi.LiteralType):
        return PrimitiveType(_literal_kind(t.values))
    if isinstance(t, mi.EnumType):
        return PrimitiveType(_literal_kind([m.value for m in t.cls]))
    if isinstance(t, _ARRAY_TYPES):
        return ListType(_convert(t.item_type, seen))
    if isinstance(t, mi.TupleType):
        items = {_convert(i, seen) for i in t.item_types}
        return ListType(items.pop() if len(items) == 1 else AnyType())
    if isinstance(t, mi.DictType):
        return MapType(_convert(t.key_type, seen), _convert(t.value_type, seen))
    if isinstance(t, _OBJECT_TYPES):
        return StructType(_convert_fields(t, seen))
    if isinstance(t, mi.UnionType):
        types = [_convert(i, seen) for i in t.types if not isinstance(i, mi.NoneType)]
        if not types:
            return PrimitiveType("void")
        if len(types) == 1:
            # Every field is nullable, so `Optional[T]` is just `T`
            return types[0]
        return UnionType(tuple(types))
    return AnyType()


def schema_info(type: Any) -> RecordSchema:
    """Get the record schema of an object-like type.

    Parameters
    ----------
    type: type
        A `msgspec.Struct`, dataclass, ``TypedDict``, or ``NamedTuple`` type.

    Returns
    -------
    RecordSchema

    Notes
    -----
    Field names are the names as seen by Python code. ``Optional[T]`` fields
    are described as ``T``.
    """
    info = mi.type_info(type)
    if isinstance(info, mi.Metadata):
        info = info.type
    if not isinstance(info, _OBJECT_TYPES):
        raise TypeError(f"Can't get a record schema for non-object type {type!r}")
    return RecordSchema(_convert_fields(info, frozenset()))


def _schema_problem(schema, allow_exact_pair):
    if not isinstance(schema, RecordSchema):
        schema = schema_info(schema)

    if len(schema.fields) == 2 and not allow_exact_pair:
        return "Record schemas with exactly two fields are not supported"

    valid_type = valid_coords = False
    for field in schema.fields:
        if field.name == "type":
            if isinstance(field.type, PrimitiveType) and field.type.kind == "string":
                valid_type = True
        elif field.name == "coordinates":
            # Only the outer list is checked, the nesting depth depends on the
            # geometry type and is checked when decoding
            if isinstance(field.type, ListType):
                valid_coords = True

    if not valid_type:
        return "Record schema has no `type` field of type `string`"
    if not valid_coords:
        return "Record schema has no `coordinates` field of type `list`"
    return None


def is_eligible(schema: Any, *, allow_exact_pair: bool = False) -> bool:
    """Check whether records of a schema can hold a GeoJSON geometry.

    A schema is eligible if it has a ``type`` field of primitive kind
    ``"string"`` and a ``coordinates`` field that is a list.

    Parameters
    ----------
    schema: RecordSchema or type
        The schema to check. Types are converted with `schema_info`.
    allow_exact_pair: bool, optional
        By default a schema with exactly two fields is never eligible, even
        when those fields are ``type`` and ``coordinates``. Set to ``True`` to
        check two-field schemas like any other.

    Returns
    -------
    bool
    """
    return _schema_problem(schema, allow_exact_pair) is None


def check_schema(schema: Any, *, allow_exact_pair: bool = False) -> None:
    """Like `is_eligible`, but raises `InvalidSchema` describing the problem
    instead of returning ``False``."""
    problem = _schema_problem(schema, allow_exact_pair)
    if problem is not None:
        raise InvalidSchema(problem)
