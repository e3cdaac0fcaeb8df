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

"""Validate Python datums against Avro schema trees."""

__version__ = "0.1.0"

from .exceptions import MalformedSchemaError, SchemaValidatorError, ValidationError
from .models.schema import (
    BOOLEAN,
    BYTES,
    DOUBLE,
    FLOAT,
    INT,
    LONG,
    NULL,
    STRING,
    ArraySchema,
    EnumSchema,
    Field,
    FixedSchema,
    MapSchema,
    PrimitiveSchema,
    RecordSchema,
    UnionSchema,
    optional,
)
from .result import ValidationResult
from .schema_validator import SchemaValidator, validate, validate_or_raise

__all__ = [
    'ArraySchema',
    'BOOLEAN',
    'BYTES',
    'DOUBLE',
    'EnumSchema',
    'FLOAT',
    'Field',
    'FixedSchema',
    'INT',
    'LONG',
    'MalformedSchemaError',
    'MapSchema',
    'NULL',
    'PrimitiveSchema',
    'RecordSchema',
    'STRING',
    'SchemaValidator',
    'SchemaValidatorError',
    'UnionSchema',
    'ValidationError',
    'ValidationResult',
    'optional',
    'validate',
    'validate_or_raise',
]
