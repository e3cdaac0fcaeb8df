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

"""Custom exceptions for the Avro schema validator."""


class SchemaValidatorError(Exception):
    """Base exception for schema-validator related errors."""
    pass


class ValidationError(SchemaValidatorError):
    """Exception raised when a datum does not conform to its schema.

    The full :class:`~avro_schema_validator.result.ValidationResult` is kept
    on ``result`` so callers can inspect every path-addressed error.
    """

    def __init__(self, result):
        self.result = result
        super().__init__(str(result))

    def __str__(self) -> str:
        return str(self.result)


class MalformedSchemaError(SchemaValidatorError):
    """Exception raised when the schema tree itself is invalid."""
    pass


class DatumLoadError(SchemaValidatorError):
    """Exception raised when a datum file cannot be loaded."""
    pass


class SchemaReferenceError(SchemaValidatorError):
    """Exception raised when a schema reference cannot be resolved."""
    pass
