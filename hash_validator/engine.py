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

"""Walks a schema and a data mapping in lock-step and collects errors."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple

from .registry import ValidatorRegistry, default_registry
from .result import Result
from .schema import JsonPointer, NestedSchema, compile_schema, join_path
from .validators.base import MISSING
from .validators.builtins import HashValidator

logger = logging.getLogger(__name__)

HASH_REQUIRED = HashValidator.error_message


def validate(data: Any, schema: Any, registry: Optional[ValidatorRegistry] = None) -> Result:
    """Validate ``data`` against ``schema``.

    Only fields named by the schema are checked; extra data fields are
    ignored. Data problems never raise, they are reported in the result.

    Args:
        data: Data mapping to validate
        schema: Raw schema dict or compiled NestedSchema
        registry: Registry to resolve rule names (default: process-wide)

    Returns:
        Result with the nested error mapping

    Raises:
        ConfigurationError: If the schema is malformed or names an
            unregistered rule
    """
    compiled = compile_schema(schema)
    if registry is None:
        registry = default_registry()

    errors = _collect_errors(data, compiled, registry)
    result = Result.from_errors(errors)

    if result.valid:
        logger.debug(f"Validated {len(compiled)} top-level field(s): valid")
    else:
        logger.debug(f"Validated {len(compiled)} top-level field(s): {len(errors)} failing")
    return result


def _collect_errors(data: Any, schema: NestedSchema, registry: ValidatorRegistry) -> Dict[str, Any]:
    errors: Dict[str, Any] = {}
    # Each level gets its own error dict, inserted under its key right away
    # so the report keeps schema order; empty ones are dropped at the end.
    pending: List[Tuple[Any, NestedSchema, Dict[str, Any], JsonPointer]] = [(data, schema, errors, "")]
    branches: List[Tuple[Dict[str, Any], str, Dict[str, Any]]] = []

    while pending:
        level_data, level_schema, level_errors, path = pending.pop()
        is_mapping = isinstance(level_data, Mapping)

        for key, node in level_schema.items():
            value = level_data[key] if is_mapping and key in level_data else MISSING
            field_path = join_path(path, key)

            if isinstance(node, NestedSchema):
                if not isinstance(value, Mapping):
                    logger.debug(f"{field_path}: {HASH_REQUIRED}")
                    level_errors[key] = HASH_REQUIRED
                    continue
                child_errors: Dict[str, Any] = {}
                level_errors[key] = child_errors
                branches.append((level_errors, key, child_errors))
                pending.append((value, node, child_errors, field_path))
                continue

            validator = registry.lookup(node.rule)
            if not validator.is_valid(value):
                logger.debug(f"{field_path}: {validator.error_message}")
                level_errors[key] = validator.error_message

    # A branch is always recorded after its parent's branch, so walking
    # backwards empties children before their parents are checked.
    for parent_errors, key, child_errors in reversed(branches):
        if not child_errors:
            del parent_errors[key]

    return errors
