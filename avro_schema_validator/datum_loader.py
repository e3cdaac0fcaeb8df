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

"""Datum file loader (YAML or JSON)."""

import importlib
import logging
from pathlib import Path
from typing import Any, Union

import yaml

from .exceptions import DatumLoadError, SchemaReferenceError
from .models.schema import SchemaNode, is_schema_node

logger = logging.getLogger(__name__)


def load_datum(file_path: Union[str, Path]) -> Any:
    """Load a datum from a YAML or JSON file.

    JSON documents are loaded through the YAML parser. Binary values can be
    written with the ``!!binary`` tag and are returned as ``bytes``.

    Args:
        file_path: Path to the datum file

    Returns:
        The parsed datum. An empty file yields None.

    Raises:
        DatumLoadError: If the file is missing, unreadable or not valid YAML
    """
    path = Path(file_path)

    if not path.exists():
        raise DatumLoadError(f"Datum file not found: {path}")

    if not path.is_file():
        raise DatumLoadError(f"Path is not a file: {path}")

    try:
        logger.debug(f"Loading datum file: {path}")
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DatumLoadError(f"Unable to read datum file {path}: {e}") from e

    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise DatumLoadError(f"Invalid YAML/JSON in datum file {path}: {e}") from e


def load_schema_reference(reference: str) -> SchemaNode:
    """Resolve a ``module.path:ATTRIBUTE`` reference to a schema node.

    The attribute may be dotted (``module:Holder.SCHEMA``).

    Raises:
        SchemaReferenceError: If the module or attribute cannot be resolved,
            or the attribute is not a schema node
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise SchemaReferenceError(
            f"Invalid schema reference: '{reference}'. Expected format: 'module.path:ATTRIBUTE'"
        )

    try:
        target = importlib.import_module(module_name)
    except ImportError as e:
        raise SchemaReferenceError(f"Cannot import schema module '{module_name}': {e}") from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise SchemaReferenceError(f"Schema attribute '{attr_path}' not found in '{module_name}'") from e

    if not is_schema_node(target):
        raise SchemaReferenceError(
            f"Schema reference '{reference}' is a {type(target).__name__}, not a schema node"
        )
    return target
