"""Schema model: the tagged shape descriptions values are compared against.

A schema is one of six variants.  ``SchemaType`` is the discriminant shared by
all of them:

- ``RecordSchema``    -> "record" : named, ordered fields
- ``UnionSchema``     -> "union"  : ordered alternatives, at most one null
- ``MapSchema``       -> "map"    : string keys, homogeneous values
- ``ArraySchema``     -> "array"  : homogeneous items
- ``EnumSchema``      -> "enum"   : named set of string symbols
- ``PrimitiveSchema`` -> one of the scalar types (null, boolean, int, long,
  float, double, bytes, string)

Record schemas may reference themselves (directly or through other records),
so they compare and hash by identity and are built incrementally with
``RecordSchema.add_field``.

``conforms(value, schema)`` answers "does this value's runtime shape match
this schema?" and is what union resolution is built on.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum, StrEnum, auto
from typing import Any, ClassVar

import numpy as np

from schema_match.record import Record

__all__ = [
    "BOOLEAN",
    "BYTES",
    "DOUBLE",
    "FLOAT",
    "INT",
    "LONG",
    "NULL",
    "STRING",
    "ArraySchema",
    "EnumSchema",
    "Field",
    "MapSchema",
    "PrimitiveSchema",
    "RecordSchema",
    "Schema",
    "SchemaType",
    "UnionSchema",
    "conforms",
]


class SchemaType(StrEnum):
    """Discriminant for every schema variant.

    StrEnum values are the lowercased member names, which are also the Avro
    type names ("record", "double", ...).
    """

    RECORD = auto()
    UNION = auto()
    MAP = auto()
    ARRAY = auto()
    ENUM = auto()
    NULL = auto()
    BOOLEAN = auto()
    INT = auto()
    LONG = auto()
    FLOAT = auto()
    DOUBLE = auto()
    BYTES = auto()
    STRING = auto()


_PRIMITIVE_TYPES = frozenset(
    {
        SchemaType.NULL,
        SchemaType.BOOLEAN,
        SchemaType.INT,
        SchemaType.LONG,
        SchemaType.FLOAT,
        SchemaType.DOUBLE,
        SchemaType.BYTES,
        SchemaType.STRING,
    }
)


@dataclass(frozen=True, slots=True)
class PrimitiveSchema:
    """A scalar schema.  Use the module-level constants (``STRING``, ``DOUBLE``...)."""

    type: SchemaType

    def __post_init__(self) -> None:
        if self.type not in _PRIMITIVE_TYPES:
            msg = f"{self.type!r} is not a primitive schema type"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f'"{self.type}"'


NULL = PrimitiveSchema(SchemaType.NULL)
BOOLEAN = PrimitiveSchema(SchemaType.BOOLEAN)
INT = PrimitiveSchema(SchemaType.INT)
LONG = PrimitiveSchema(SchemaType.LONG)
FLOAT = PrimitiveSchema(SchemaType.FLOAT)
DOUBLE = PrimitiveSchema(SchemaType.DOUBLE)
BYTES = PrimitiveSchema(SchemaType.BYTES)
STRING = PrimitiveSchema(SchemaType.STRING)


@dataclass(frozen=True, slots=True)
class Field:
    """A named field of a record schema."""

    name: str
    schema: Schema
    default: Any = None


@dataclass(eq=False, slots=True)
class RecordSchema:
    """A named record with fields in declaration order.

    Compared and hashed by identity: a record schema can contain itself, so
    structural equality would not terminate.  Two records are considered the
    same shape when their ``fullname`` is equal.

    Example::

        node = RecordSchema("Node")
        node.add_field("value", LONG)
        node.add_field("next", UnionSchema((NULL, node)))
    """

    type: ClassVar[SchemaType] = SchemaType.RECORD

    name: str
    fields: list[Field] = field(default_factory=list)
    namespace: str | None = None

    @property
    def fullname(self) -> str:
        if self.namespace:
            return f"{self.namespace}.{self.name}"
        return self.name

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def add_field(self, name: str, schema: Schema, default: Any = None) -> RecordSchema:
        if name in self.field_names:
            msg = f"duplicate field {name!r} in record {self.fullname}"
            raise ValueError(msg)
        self.fields.append(Field(name, schema, default))
        return self

    def get_field(self, name: str) -> Field | None:
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def __str__(self) -> str:
        return f'"{self.fullname}"'


@dataclass(eq=False, slots=True)
class EnumSchema:
    """A named set of symbols.  Values are the symbol strings (or ``Enum`` members)."""

    type: ClassVar[SchemaType] = SchemaType.ENUM

    name: str
    symbols: tuple[str, ...]
    namespace: str | None = None

    @property
    def fullname(self) -> str:
        if self.namespace:
            return f"{self.namespace}.{self.name}"
        return self.name

    def __str__(self) -> str:
        return f'"{self.fullname}"'


@dataclass(frozen=True, slots=True)
class MapSchema:
    type: ClassVar[SchemaType] = SchemaType.MAP

    values: Schema

    def __str__(self) -> str:
        return f'{{"type": "map", "values": {self.values}}}'


@dataclass(frozen=True, slots=True)
class ArraySchema:
    type: ClassVar[SchemaType] = SchemaType.ARRAY

    items: Schema

    def __str__(self) -> str:
        return f'{{"type": "array", "items": {self.items}}}'


@dataclass(frozen=True, slots=True)
class UnionSchema:
    """Ordered alternatives.  At most one member may be ``NULL``; unions do not nest."""

    type: ClassVar[SchemaType] = SchemaType.UNION

    members: tuple[Schema, ...]

    def __post_init__(self) -> None:
        # Accept any sequence from callers but store a tuple.
        object.__setattr__(self, "members", tuple(self.members))
        nulls = sum(1 for m in self.members if m == NULL)
        if nulls > 1:
            msg = f"union may contain at most one null member, got {nulls}"
            raise ValueError(msg)
        if any(isinstance(m, UnionSchema) for m in self.members):
            msg = "unions may not immediately contain other unions"
            raise ValueError(msg)

    @property
    def is_nullable(self) -> bool:
        return NULL in self.members

    def __str__(self) -> str:
        return "[" + ", ".join(str(m) for m in self.members) + "]"


Schema = RecordSchema | UnionSchema | MapSchema | ArraySchema | EnumSchema | PrimitiveSchema


def _is_integer(value: Any) -> bool:
    # bool subclasses int; a boolean is never an int/long
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def _is_sequence(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return True
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def conforms(value: Any, schema: Schema) -> bool:
    """Return True if ``value``'s runtime shape matches ``schema``.

    Records conform by schema full name, not by object identity, so a value
    built against an equivalent schema object still resolves.
    """
    schema_type = schema.type

    if schema_type == SchemaType.UNION:
        return any(conforms(value, m) for m in schema.members)  # type: ignore[union-attr]
    if schema_type == SchemaType.NULL:
        return value is None
    if value is None:
        return False

    if schema_type == SchemaType.RECORD:
        return isinstance(value, Record) and value.schema.fullname == schema.fullname  # type: ignore[union-attr]
    if schema_type == SchemaType.MAP:
        return isinstance(value, Mapping)
    if schema_type == SchemaType.ARRAY:
        return _is_sequence(value)
    if schema_type == SchemaType.ENUM:
        symbol = value.name if isinstance(value, Enum) else value
        return isinstance(symbol, str) and symbol in schema.symbols  # type: ignore[union-attr]
    if schema_type == SchemaType.BOOLEAN:
        return isinstance(value, (bool, np.bool_))
    if schema_type in (SchemaType.INT, SchemaType.LONG):
        return _is_integer(value)
    if schema_type in (SchemaType.FLOAT, SchemaType.DOUBLE):
        return isinstance(value, (float, np.floating))
    if schema_type == SchemaType.BYTES:
        return isinstance(value, (bytes, bytearray))

    # STRING is the final SchemaType variant
    return isinstance(value, str)
