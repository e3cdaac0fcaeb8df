from __future__ import annotations

from typing import Any

from ..models.schema import INT_MAX_VALUE, INT_MIN_VALUE


def is_integer_value(value: Any) -> bool:
    # bool subclasses int but is never an Avro number
    return isinstance(value, int) and not isinstance(value, bool)


def is_numeric_value(value: Any) -> bool:
    return is_integer_value(value) or isinstance(value, float)


def integer_type_name(value: int) -> str:
    return "int" if INT_MIN_VALUE <= value <= INT_MAX_VALUE else "long"


def avro_type_name(value: Any) -> str:
    """Return the Avro type name that best describes a Python value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return integer_type_name(value)
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (bytes, bytearray)):
        return "bytes"
    if isinstance(value, dict):
        return "record"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def actual_value_message(value: Any) -> str:
    """Describe a value for diagnostics, e.g. ``int with value 3``."""
    type_name = avro_type_name(value)
    if value is None:
        return type_name
    return f"{type_name} with value {value!r}"
