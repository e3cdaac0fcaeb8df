from .schema import (
    BOOLEAN,
    BYTES,
    COMPLEX_TYPES,
    DOUBLE,
    FLOAT,
    INT,
    INT_MAX_VALUE,
    INT_MIN_VALUE,
    LONG,
    LONG_MAX_VALUE,
    LONG_MIN_VALUE,
    NULL,
    STRING,
    ArraySchema,
    EnumSchema,
    Field,
    FixedSchema,
    MapSchema,
    PrimitiveSchema,
    RecordSchema,
    SchemaNode,
    UnionSchema,
    optional,
)
