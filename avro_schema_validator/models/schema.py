from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from ..exceptions import MalformedSchemaError


INT_MIN_VALUE = -(1 << 31)
INT_MAX_VALUE = (1 << 31) - 1
LONG_MIN_VALUE = -(1 << 63)
LONG_MAX_VALUE = (1 << 63) - 1

PRIMITIVE_TYPES = ("null", "boolean", "int", "long", "float", "double", "string", "bytes")
RECORD_TYPES = ("record", "error", "request")

# Kinds whose nested errors say more than a bare type mismatch
COMPLEX_TYPES = frozenset(("array", "error", "map", "record", "request"))


@dataclass(frozen=True)
class PrimitiveSchema:
    type_sym: str

    def __post_init__(self) -> None:
        if self.type_sym not in PRIMITIVE_TYPES:
            raise MalformedSchemaError(
                f"Invalid primitive type '{self.type_sym}'. Valid types: {list(PRIMITIVE_TYPES)}"
            )


@dataclass(frozen=True)
class FixedSchema:
    size: int
    name: Optional[str] = None
    type_sym: str = field(default="fixed", init=False)

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size < 0:
            raise MalformedSchemaError(f"Fixed size must be a non-negative integer, got: {self.size!r}")


@dataclass(frozen=True)
class EnumSchema:
    symbols: Tuple[str, ...]
    name: Optional[str] = None
    type_sym: str = field(default="enum", init=False)

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so the node stays hashable
        object.__setattr__(self, "symbols", tuple(self.symbols))


@dataclass(frozen=True)
class ArraySchema:
    items: "SchemaNode"
    type_sym: str = field(default="array", init=False)


@dataclass(frozen=True)
class MapSchema:
    values: "SchemaNode"
    type_sym: str = field(default="map", init=False)


@dataclass(frozen=True)
class Field:
    name: str
    type: "SchemaNode"


@dataclass(frozen=True)
class RecordSchema:
    fields: Tuple[Field, ...]
    name: Optional[str] = None
    type_sym: str = "record"

    def __post_init__(self) -> None:
        if self.type_sym not in RECORD_TYPES:
            raise MalformedSchemaError(
                f"Invalid record type '{self.type_sym}'. Valid types: {list(RECORD_TYPES)}"
            )
        object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)


@dataclass(frozen=True)
class UnionSchema:
    schemas: Tuple["SchemaNode", ...]
    type_sym: str = field(default="union", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "schemas", tuple(self.schemas))
        if not self.schemas:
            raise MalformedSchemaError("Union must declare at least one branch")


SchemaNode = Union[PrimitiveSchema, FixedSchema, EnumSchema, ArraySchema, MapSchema, RecordSchema, UnionSchema]

SCHEMA_NODE_TYPES = (PrimitiveSchema, FixedSchema, EnumSchema, ArraySchema, MapSchema, RecordSchema, UnionSchema)


def is_schema_node(value) -> bool:
    return isinstance(value, SCHEMA_NODE_TYPES)


# -------------------------
# Primitive schema singletons
# -------------------------

NULL = PrimitiveSchema("null")
BOOLEAN = PrimitiveSchema("boolean")
INT = PrimitiveSchema("int")
LONG = PrimitiveSchema("long")
FLOAT = PrimitiveSchema("float")
DOUBLE = PrimitiveSchema("double")
STRING = PrimitiveSchema("string")
BYTES = PrimitiveSchema("bytes")


def optional(schema: SchemaNode) -> UnionSchema:
    """Return the common ``["null", schema]`` union."""
    return UnionSchema((NULL, schema))
