"""Tests for record, array and map traversal and path composition."""

import copy

import pytest

from avro_schema_validator import (
    INT,
    STRING,
    ArraySchema,
    Field,
    MapSchema,
    RecordSchema,
    SchemaValidator,
    validate,
)
from avro_schema_validator.exceptions import MalformedSchemaError
from avro_schema_validator.models.schema import PrimitiveSchema
from avro_schema_validator.schema_validator import deeper_path


PERSON = RecordSchema(
    (
        Field("name", STRING),
        Field("age", INT),
        Field("tags", ArraySchema(STRING)),
        Field("scores", MapSchema(INT)),
    ),
    name="Person",
)


def _person(**overrides):
    datum = {"name": "Ada", "age": 36, "tags": ["math", "code"], "scores": {"chess": 1}}
    datum.update(overrides)
    return datum


def test_well_typed_nested_record_is_valid() -> None:
    assert validate(PERSON, _person()).successful


def test_record_field_errors_use_dotted_path() -> None:
    result = validate(PERSON, _person(name=7))

    assert result.errors == ["at .name expected type string, got int with value 7"]


def test_array_element_error_path_inside_record() -> None:
    result = validate(PERSON, _person(tags=["a", "b", 3]))

    assert result.errors == ["at .tags[2] expected type string, got int with value 3"]


def test_missing_field_is_validated_as_null() -> None:
    datum = _person()
    del datum["age"]

    result = validate(PERSON, datum)

    assert result.errors == ["at .age expected type int, got null"]


def test_extra_record_keys_are_ignored_by_default() -> None:
    assert validate(PERSON, _person(nickname="countess")).successful


def test_extra_record_keys_reported_when_enabled() -> None:
    result = validate(PERSON, _person(nickname="countess"), fail_on_extra_fields=True)

    assert result.errors == ["at . extra field 'nickname' - not in schema"]


def test_record_rejects_non_mapping() -> None:
    result = validate(PERSON, ["Ada"])

    assert result.errors == ["at . expected type record, got array with value ['Ada']"]


def test_error_and_request_records_validate_like_records() -> None:
    error_schema = RecordSchema((Field("code", INT),), type_sym="error")
    request_schema = RecordSchema((Field("code", INT),), type_sym="request")

    assert validate(error_schema, {"code": 1}).successful
    assert validate(request_schema, {"code": "x"}).errors == [
        "at .code expected type int, got string with value 'x'"
    ]
    assert validate(error_schema, 1).errors == ["at . expected type error, got int with value 1"]


def test_all_record_fields_checked_without_short_circuit() -> None:
    result = validate(PERSON, {"name": 1, "age": "x", "tags": [], "scores": {}})

    assert list(result.path_errors) == [".name", ".age"]


def test_every_array_element_is_checked() -> None:
    result = validate(ArraySchema(INT), [1, "a", 2, "b"])

    assert result.path_errors == {
        ".[1]": ["expected type int, got string with value 'a'"],
        ".[3]": ["expected type int, got string with value 'b'"],
    }


def test_array_accepts_tuples() -> None:
    assert validate(ArraySchema(INT), (1, 2, 3)).successful


def test_non_sequence_for_array_records_only_the_mismatch() -> None:
    result = validate(ArraySchema(INT), "123")

    assert result.errors == ["at . expected type array, got string with value '123'"]


def test_nested_arrays_compose_index_paths() -> None:
    result = validate(ArraySchema(ArraySchema(INT)), [[1], [2, "x"]])

    assert result.errors == ["at .[1][1] expected type int, got string with value 'x'"]


def test_map_values_checked_at_key_path() -> None:
    result = validate(MapSchema(INT), {"a": 1, "b": "two"})

    assert result.errors == ["at .b expected type int, got string with value 'two'"]


def test_map_key_and_value_checks_both_run() -> None:
    result = validate(MapSchema(INT), {1: "one"})

    assert result.path_errors == {
        ".": ["unexpected key type 'int' in map"],
        ".1": ["expected type int, got string with value 'one'"],
    }


def test_map_rejects_non_mapping() -> None:
    result = validate(MapSchema(INT), [("a", 1)])

    assert result.errors == ["at . expected type map, got array with value [('a', 1)]"]


def test_errors_at_same_path_accumulate() -> None:
    result = validate(MapSchema(STRING), {1: "a", 2: "b"})

    assert result.path_errors["."] == [
        "unexpected key type 'int' in map",
        "unexpected key type 'int' in map",
    ]


class _DecimalSchema:
    type_sym = "decimal"


def test_unknown_schema_type_aborts_validation() -> None:
    with pytest.raises(MalformedSchemaError):
        validate(ArraySchema(_DecimalSchema()), [1])


@pytest.mark.parametrize("type_sym", ["array", "record", "union", "map", "enum", "fixed", "decimal"])
def test_primitive_schema_rejects_non_primitive_types(type_sym) -> None:
    with pytest.raises(MalformedSchemaError):
        validate(PrimitiveSchema(type_sym), [])


def test_invalid_record_type_is_malformed() -> None:
    with pytest.raises(MalformedSchemaError):
        RecordSchema((), type_sym="struct")


def test_validator_does_not_mutate_datum() -> None:
    datum = _person(age="old")
    snapshot = copy.deepcopy(datum)

    SchemaValidator(PERSON, datum).validate()

    assert datum == snapshot


@pytest.mark.parametrize(
    "path, name, expected",
    [
        (".", "x", ".x"),
        (".x", "y", ".x.y"),
        ("root", "x", "root.x"),
        (".tags[2]", "z", ".tags[2].z"),
    ],
)
def test_deeper_path_collapses_adjacent_separators(path, name, expected) -> None:
    assert deeper_path(path, name) == expected
