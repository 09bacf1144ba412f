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

"""Load schemas from YAML (or JSON) documents."""

import logging
from pathlib import Path
from typing import Any, Union

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError

from .exceptions import ConfigurationError
from .schema import NestedSchema, compile_schema

logger = logging.getLogger(__name__)


# Shape of a schema document: an object whose values are rule names or
# objects of the same shape.
SCHEMA_DOCUMENT_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "$ref": "#/definitions/schema",
    "definitions": {
        "schema": {
            "type": "object",
            "additionalProperties": {
                "oneOf": [
                    {"type": "string", "minLength": 1},
                    {"$ref": "#/definitions/schema"},
                ]
            },
        }
    },
}


def _check_document(document: Any, source: str) -> NestedSchema:
    if document is None:
        document = {}

    try:
        jsonschema.validate(instance=document, schema=SCHEMA_DOCUMENT_SCHEMA)
    except JsonSchemaValidationError as e:
        path = "/" + "/".join(str(p) for p in e.absolute_path) if e.absolute_path else ""
        raise ConfigurationError(
            f"Invalid schema document {source}: {e.message} (path={path})"
        ) from e

    return compile_schema(document)


def load_schema_from_string(content: str) -> NestedSchema:
    """Load a schema from YAML string content.

    Raises:
        ConfigurationError: If the content cannot be parsed or is not a schema
    """
    try:
        document = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse YAML content: {exc}") from exc

    return _check_document(document, "<string>")


def load_schema(file_path: Union[str, Path]) -> NestedSchema:
    """Load a schema file.

    Args:
        file_path: Path to a YAML or JSON schema document

    Returns:
        Compiled schema

    Raises:
        ConfigurationError: If the file cannot be read, parsed or is not a schema
    """
    path = Path(file_path)

    if not path.exists():
        raise ConfigurationError(f"Schema file not found: {path}")

    if not path.is_file():
        raise ConfigurationError(f"Path is not a file: {path}")

    logger.debug(f"Loading schema file: {path}")
    try:
        with open(path, 'r', encoding='utf-8') as stream:
            document = yaml.safe_load(stream)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse YAML file {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigurationError(f"Failed to read schema file {path}: {exc}") from exc

    return _check_document(document, str(path))
