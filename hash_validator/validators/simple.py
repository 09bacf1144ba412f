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

from typing import Any, Callable, Optional

from .base import Base
from ..exceptions import ConfigurationError


class SimpleValidator(Base):
    """Validator built from a name and a one-argument boolean function."""

    def __init__(self, name: str, predicate: Callable[[Any], bool], error_message: Optional[str] = None):
        if not name or not isinstance(name, str):
            raise ConfigurationError(f"Validator name must be a non-empty string, got: {name!r}")
        if not callable(predicate):
            raise ConfigurationError(f"Predicate for validator '{name}' must be callable, got: {predicate!r}")
        if error_message is not None and not isinstance(error_message, str):
            raise ConfigurationError(f"Error message for validator '{name}' must be a string, got: {error_message!r}")

        self.name = name
        self.predicate = predicate
        self.error_message = error_message if error_message is not None else f"{name} required"

    def is_valid(self, value: Any) -> bool:
        return bool(self.predicate(value))


def build_validator(
    name: str,
    predicate: Callable[[Any], bool],
    error_message: Optional[str] = None,
) -> SimpleValidator:
    """Build an ad-hoc validator.

    Args:
        name: Rule name referenced from schemas
        predicate: Function returning a truthy value when the rule holds
        error_message: Message reported on failure (default: "<name> required")

    Returns:
        A validator ready to be registered
    """
    return SimpleValidator(name, predicate, error_message)
