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

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class _Missing:
    """Marker for a field that is absent from the data mapping."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def is_absent(value: Any) -> bool:
    """Return True for values that count as "not there" (missing or None)."""
    return value is MISSING or value is None


class Base(ABC):
    """Abstract base validator.

    A validator is a named predicate over a single value with a fixed
    message reported when the predicate fails. Subclasses either set
    ``name`` and ``error_message`` as class attributes or assign them
    in ``__init__``.
    """

    name: str
    error_message: str

    @abstractmethod
    def is_valid(self, value: Any) -> bool:
        """Return True if ``value`` satisfies this rule."""
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={getattr(self, 'name', None)!r}>"


def conforms(candidate: Any) -> bool:
    """Check whether ``candidate`` exposes the validator capability.

    The check is structural: a non-empty string ``name``, a string
    ``error_message`` and a callable ``is_valid``. Inheriting from
    :class:`Base` is not required.
    """
    if isinstance(candidate, type):
        return False
    name = getattr(candidate, "name", None)
    if not isinstance(name, str) or not name:
        return False
    if not isinstance(getattr(candidate, "error_message", None), str):
        return False
    return callable(getattr(candidate, "is_valid", None))
