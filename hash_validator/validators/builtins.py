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

"""Built-in validators installed into every registry at startup."""

from __future__ import annotations

import datetime
import numbers
from collections.abc import Mapping
from typing import Any, List

from .base import Base, is_absent


class HashValidator(Base):
    """Value must be a mapping."""

    name = "hash"
    error_message = "hash required"

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, Mapping)


class PresenceValidator(Base):
    """Value must be present and not None."""

    name = "required"
    error_message = "is required"

    def is_valid(self, value: Any) -> bool:
        return not is_absent(value)


class StringValidator(Base):
    """Value must be text."""

    name = "string"
    error_message = "string required"

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, str)


class NumericValidator(Base):
    """Value must be a number; numeric-looking strings and booleans do not count."""

    name = "numeric"
    error_message = "numeric required"

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, numbers.Number) and not isinstance(value, bool)


class ArrayValidator(Base):
    """Value must be a list or tuple."""

    name = "array"
    error_message = "array required"

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, (list, tuple))


class TimeValidator(Base):
    """Value must be a datetime; textual timestamps do not count."""

    name = "time"
    error_message = "time required"

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, datetime.datetime)


BUILTIN_VALIDATORS = (
    HashValidator,
    PresenceValidator,
    StringValidator,
    NumericValidator,
    ArrayValidator,
    TimeValidator,
)


def builtin_validators() -> List[Base]:
    return [validator_cls() for validator_cls in BUILTIN_VALIDATORS]
