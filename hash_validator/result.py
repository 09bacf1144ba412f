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

"""Outcome of a single validation run."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, List, Tuple

from .exceptions import SchemaValidationError
from .schema import JsonPointer, join_path


@dataclass(frozen=True)
class Issue:
    message: str
    path: JsonPointer = ""


def _copy_tree(errors: Mapping, wrap: Callable[[Dict[str, Any]], Mapping]) -> Mapping:
    """Copy a nested error mapping level by level without recursing.

    Raises:
        ValueError: If a nested error mapping is empty
    """
    root: Dict[str, Any] = {}
    pending: List[Tuple[Mapping, Dict[str, Any], JsonPointer]] = [(errors, root, "")]
    while pending:
        source, target, path = pending.pop()
        for key, value in source.items():
            if not isinstance(value, Mapping):
                target[key] = value
                continue
            child_path = join_path(path, key)
            if not value:
                raise ValueError(f"Empty nested error mapping (path={child_path})")
            child: Dict[str, Any] = {}
            target[key] = wrap(child)
            pending.append((value, child, child_path))
    return wrap(root)


def _freeze(errors: Mapping) -> Mapping:
    return _copy_tree(errors, MappingProxyType)


def _thaw(errors: Mapping) -> Dict[str, Any]:
    return _copy_tree(errors, lambda level: level)


@dataclass(frozen=True)
class Result:
    """Validity flag plus a nested mapping of field name to error.

    Each error entry is either a message string or a non-empty nested
    error mapping mirroring the schema. ``valid`` is True iff ``errors``
    is empty. Results compare by value but are not hashable.
    """

    valid: bool
    errors: Mapping

    __hash__ = None

    def __post_init__(self):
        if self.valid != (not self.errors):
            raise ValueError(f"Inconsistent result: valid={self.valid} with {len(self.errors)} error(s)")
        object.__setattr__(self, "errors", _freeze(self.errors))

    @classmethod
    def from_errors(cls, errors: Mapping) -> "Result":
        return cls(valid=not errors, errors=errors)

    def __bool__(self) -> bool:
        return self.valid

    def to_dict(self) -> Dict[str, Any]:
        """Return the errors as plain, mutable dicts."""
        return _thaw(self.errors)

    def iter_issues(self) -> Iterator[Issue]:
        """Yield one issue per failing leaf, depth-first in schema order."""
        stack = [("", iter(self.errors.items()))]
        while stack:
            path, items = stack[-1]
            for key, value in items:
                child_path = join_path(path, key)
                if isinstance(value, Mapping):
                    stack.append((child_path, iter(value.items())))
                    break
                yield Issue(message=value, path=child_path)
            else:
                stack.pop()

    def format_errors(self) -> str:
        return "\n".join(f"  - {issue.message} (path={issue.path})" for issue in self.iter_issues())

    def raise_for_errors(self) -> "Result":
        """Raise SchemaValidationError if the result is invalid."""
        if not self.valid:
            raise SchemaValidationError(f"Validation failed:\n{self.format_errors()}", result=self)
        return self
