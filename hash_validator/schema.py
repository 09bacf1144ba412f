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

"""Schema model.

A schema maps field names to rule nodes. A node is either a leaf naming
a registered validator or a nested schema the field's value must satisfy.
Plain dicts are accepted everywhere and compiled into this tagged form so
that a rule never gets confused with nested data.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Tuple, Union

from .exceptions import ConfigurationError


JsonPointer = str


@dataclass(frozen=True)
class RuleLeaf:
    rule: str


@dataclass(frozen=True)
class NestedSchema:
    fields: Mapping[str, "RuleNode"]

    def items(self) -> Iterator[Tuple[str, "RuleNode"]]:
        return iter(self.fields.items())

    def __len__(self) -> int:
        return len(self.fields)


RuleNode = Union[RuleLeaf, NestedSchema]


def jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def join_path(base: JsonPointer, token: Any) -> JsonPointer:
    return f"{base}/{jp_escape(str(token))}"


def compile_schema(schema: Any) -> NestedSchema:
    """Compile a raw schema mapping into the tagged schema model.

    Rule names are not resolved here; unknown names are reported when
    validation reaches them. Nesting depth is not limited by the
    interpreter stack.

    Raises:
        ConfigurationError: If the schema is not a mapping or holds a node
            that is neither a rule name nor a nested mapping
    """
    if isinstance(schema, NestedSchema):
        return schema
    if not isinstance(schema, Mapping):
        raise ConfigurationError(f"Schema must be a mapping, got: {type(schema).__name__}")

    root_fields: Dict[Any, RuleNode] = {}
    root = NestedSchema(fields=MappingProxyType(root_fields))

    # (raw mapping, fields being filled, path); proxies are live views of the
    # dicts, so children can be filled after their parent node is created.
    pending: List[Tuple[Mapping, Dict[Any, RuleNode], JsonPointer]] = [(schema, root_fields, "")]
    while pending:
        raw, fields, path = pending.pop()
        for key, node in raw.items():
            node_path = join_path(path, key)
            if isinstance(node, (RuleLeaf, NestedSchema)):
                fields[key] = node
            elif isinstance(node, str):
                if not node:
                    raise ConfigurationError(f"Empty rule name in schema (path={node_path})")
                fields[key] = RuleLeaf(node)
            elif isinstance(node, Mapping):
                child_fields: Dict[Any, RuleNode] = {}
                fields[key] = NestedSchema(fields=MappingProxyType(child_fields))
                pending.append((node, child_fields, node_path))
            else:
                raise ConfigurationError(
                    f"Invalid schema node of type '{type(node).__name__}' (path={node_path}). "
                    f"Expected a rule name or a nested mapping"
                )

    return root
