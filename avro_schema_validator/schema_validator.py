# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Validate Python datums against Avro schema trees.

The validator walks the schema and the datum together and records every
mismatch it finds, keyed by the path of the offending value, e.g.
``validate(RecordSchema((Field("id", INT),)), {"id": "x"}).errors`` is
``["at .id expected type int, got string with value 'x'"]``.
"""

from __future__ import annotations

import logging
import re
from typing import Any, List, Optional, Tuple

from .config import validator_config
from .exceptions import MalformedSchemaError, ValidationError
from .models.schema import (
    COMPLEX_TYPES,
    INT_MAX_VALUE,
    INT_MIN_VALUE,
    LONG_MAX_VALUE,
    LONG_MIN_VALUE,
    SchemaNode,
)
from .result import ValidationResult
from .utils.type_names import (
    actual_value_message,
    avro_type_name,
    is_integer_value,
    is_numeric_value,
)

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "."
_SEPARATOR_RUN_RE = re.compile(re.escape(PATH_SEPARATOR) + "{2,}")

_BYTE_TYPES = (str, bytes, bytearray)
_SEQUENCE_TYPES = (list, tuple)


def deeper_path(path: str, name: Any) -> str:
    """Append a field or map key to a path, collapsing adjacent separators."""
    joined = f"{path}{PATH_SEPARATOR}{name}"
    return _SEPARATOR_RUN_RE.sub(PATH_SEPARATOR, joined)


def _byte_size(datum) -> int:
    if isinstance(datum, str):
        return len(datum.encode("utf-8"))
    return len(datum)


class SchemaValidator:
    """Validator for a single (schema, datum) pair."""

    def __init__(
        self,
        expected_schema: SchemaNode,
        datum: Any,
        *,
        root_identifier: Optional[str] = None,
        fail_on_extra_fields: Optional[bool] = None,
    ):
        """Initialize the validator.

        Args:
            expected_schema: Schema tree the datum must conform to
            datum: Value to check. Never modified.
            root_identifier: Path label of the datum itself. If None, uses global config.
            fail_on_extra_fields: Report record keys missing from the schema. If None, uses global config.
        """
        self.expected_schema = expected_schema
        self.datum = datum
        self.root_identifier = (
            root_identifier if root_identifier is not None else validator_config.root_identifier
        )
        self.fail_on_extra_fields = (
            fail_on_extra_fields if fail_on_extra_fields is not None else validator_config.fail_on_extra_fields
        )
        self.result = ValidationResult()

    @classmethod
    def check(cls, expected_schema: SchemaNode, datum: Any, **kwargs) -> ValidationResult:
        """Construct a validator and run it."""
        return cls(expected_schema, datum, **kwargs).validate()

    @classmethod
    def check_or_raise(cls, expected_schema: SchemaNode, datum: Any, **kwargs) -> ValidationResult:
        """Construct a validator and run it, raising on any error."""
        return cls(expected_schema, datum, **kwargs).validate_or_raise()

    def validate(self) -> ValidationResult:
        """Run the full traversal and return the collected errors.

        Raises:
            MalformedSchemaError: If the schema contains an unknown type.
        """
        result = ValidationResult()
        self._validate_recursive(self.expected_schema, self.datum, self.root_identifier, result)
        self.result = result
        logger.debug(
            "Validated datum against '%s' schema at %s: %d path(s) with errors",
            self.expected_schema.type_sym,
            self.root_identifier,
            len(result.path_errors),
        )
        return result

    def validate_or_raise(self) -> ValidationResult:
        """Run the traversal and raise ValidationError if anything failed."""
        result = self.validate()
        if result.failure:
            raise ValidationError(result)
        return result

    def _validate_recursive(self, expected_schema: SchemaNode, datum: Any, path: str, result: ValidationResult) -> None:
        type_sym = getattr(expected_schema, "type_sym", None)

        if type_sym == "null":
            matched = datum is None

        elif type_sym == "boolean":
            matched = isinstance(datum, bool)

        elif type_sym in ("string", "bytes"):
            matched = isinstance(datum, _BYTE_TYPES)

        elif type_sym == "int":
            matched = is_integer_value(datum)
            if matched:
                self._validate_range(datum, INT_MIN_VALUE, INT_MAX_VALUE, path, result)

        elif type_sym == "long":
            matched = is_integer_value(datum)
            if matched:
                self._validate_range(datum, LONG_MIN_VALUE, LONG_MAX_VALUE, path, result)

        elif type_sym in ("float", "double"):
            matched = is_numeric_value(datum)

        elif type_sym == "fixed":
            self._validate_fixed(expected_schema, datum, path, result)
            return

        elif type_sym == "enum":
            if datum not in expected_schema.symbols:
                result.add_error(
                    path,
                    f"expected enum with values {list(expected_schema.symbols)}, got {actual_value_message(datum)}",
                )
            return

        elif type_sym == "array":
            matched = isinstance(datum, _SEQUENCE_TYPES)
            if matched:
                self._validate_array(expected_schema, datum, path, result)

        elif type_sym == "map":
            matched = isinstance(datum, dict)
            if matched:
                self._validate_map(expected_schema, datum, path, result)

        elif type_sym in ("record", "error", "request"):
            matched = isinstance(datum, dict)
            if matched:
                self._validate_record(expected_schema, datum, path, result)

        elif type_sym == "union":
            self._validate_union(expected_schema, datum, path, result)
            return

        else:
            raise MalformedSchemaError(f"Unexpected schema type {type_sym!r} in {expected_schema!r}")

        if not matched:
            result.add_error(path, f"expected type {type_sym}, got {actual_value_message(datum)}")

    @staticmethod
    def _validate_range(datum: int, low: int, high: int, path: str, result: ValidationResult) -> None:
        if not low <= datum <= high:
            result.add_error(path, f"out of bound value {datum}")

    @staticmethod
    def _validate_fixed(expected_schema, datum: Any, path: str, result: ValidationResult) -> None:
        size = expected_schema.size
        if isinstance(datum, _BYTE_TYPES):
            datum_size = _byte_size(datum)
            if datum_size != size:
                result.add_error(path, f"expected fixed with size {size}, got {datum!r} with size {datum_size}")
            return
        result.add_error(path, f"expected fixed with size {size}, got {actual_value_message(datum)}")

    def _validate_array(self, expected_schema, datum, path: str, result: ValidationResult) -> None:
        for idx, item in enumerate(datum):
            self._validate_recursive(expected_schema.items, item, f"{path}[{idx}]", result)

    def _validate_map(self, expected_schema, datum: dict, path: str, result: ValidationResult) -> None:
        for key in datum:
            if not isinstance(key, str):
                result.add_error(path, f"unexpected key type '{avro_type_name(key)}' in map")

        for key, value in datum.items():
            self._validate_recursive(expected_schema.values, value, deeper_path(path, key), result)

    def _validate_record(self, expected_schema, datum: dict, path: str, result: ValidationResult) -> None:
        for field in expected_schema.fields:
            self._validate_recursive(field.type, datum.get(field.name), deeper_path(path, field.name), result)

        if self.fail_on_extra_fields:
            declared = set(expected_schema.field_names)
            for key in datum:
                if key not in declared:
                    result.add_error(path, f"extra field '{key}' - not in schema")

    def _validate_union(self, expected_schema, datum: Any, path: str, result: ValidationResult) -> None:
        schemas = expected_schema.schemas
        if len(schemas) == 1:
            self._validate_recursive(schemas[0], datum, path, result)
            return

        outcomes = self._validate_possible_types(schemas, datum, path)
        if any(branch_result.successful for _, branch_result in outcomes):
            return

        complex_failure = next(
            (branch_result for schema, branch_result in outcomes if schema.type_sym in COMPLEX_TYPES),
            None,
        )
        if complex_failure is not None:
            logger.debug(f"Union at {path} matched no branch, reporting nested errors of the first complex branch")
            result.merge_errors(complex_failure.path_errors)
            return

        types = ", ".join(f"'{schema.type_sym}'" for schema in schemas)
        result.add_error(path, f"expected union of [{types}], got {actual_value_message(datum)}")

    def _validate_possible_types(
        self, schemas, datum: Any, path: str
    ) -> List[Tuple[SchemaNode, ValidationResult]]:
        return [
            (
                schema,
                type(self).check(
                    schema,
                    datum,
                    root_identifier=path,
                    fail_on_extra_fields=self.fail_on_extra_fields,
                ),
            )
            for schema in schemas
        ]


def validate(expected_schema: SchemaNode, datum: Any, root_identifier: Optional[str] = None, **kwargs) -> ValidationResult:
    """Validate a datum and return every error found. Never raises ValidationError."""
    return SchemaValidator.check(expected_schema, datum, root_identifier=root_identifier, **kwargs)


def validate_or_raise(
    expected_schema: SchemaNode, datum: Any, root_identifier: Optional[str] = None, **kwargs
) -> ValidationResult:
    """Validate a datum, raising ValidationError if any error was found."""
    return SchemaValidator.check_or_raise(expected_schema, datum, root_identifier=root_identifier, **kwargs)
