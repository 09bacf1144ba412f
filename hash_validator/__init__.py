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

"""Validate nested mappings against declarative rule schemas.

Example::

    from hash_validator import validate

    result = validate({"foo": 1, "bar": 2}, {"foo": "numeric", "bar": "string"})
    result.valid   # False
    result.errors  # {"bar": "string required"}
"""

from .exceptions import ConfigurationError, HashValidatorError, SchemaValidationError
from .validators import MISSING, Base, SimpleValidator, build_validator
from .registry import ValidatorRegistry, append_validator, default_registry, register_validator
from .schema import NestedSchema, RuleLeaf, compile_schema
from .result import Issue, Result
from .engine import validate
from .loader import load_schema, load_schema_from_string

__version__ = "0.1.0"

# Built-ins are installed once, when the package is first imported.
default_registry()

__all__ = [
    'validate',
    'register_validator',
    'append_validator',
    'build_validator',
    'default_registry',
    'ValidatorRegistry',
    'Base',
    'SimpleValidator',
    'MISSING',
    'compile_schema',
    'NestedSchema',
    'RuleLeaf',
    'Result',
    'Issue',
    'load_schema',
    'load_schema_from_string',
    'HashValidatorError',
    'ConfigurationError',
    'SchemaValidationError',
]
