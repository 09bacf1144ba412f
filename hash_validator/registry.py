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

"""Process-wide store of named validators."""

import logging
import threading
from types import MappingProxyType
from typing import Any, Callable, Iterable, List, Mapping, Optional

from .exceptions import ConfigurationError
from .validators.base import Base, conforms
from .validators.builtins import builtin_validators
from .validators.simple import build_validator

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """Append-only mapping from rule name to validator.

    Appends are serialized by a lock and publish a fresh read-only
    snapshot, so lookups never need to lock.
    """

    def __init__(self, validators: Optional[Iterable[Base]] = None):
        self._lock = threading.Lock()
        self._validators: Mapping[str, Base] = MappingProxyType({})
        for validator in validators or ():
            self.register(validator)

    @classmethod
    def with_builtins(cls) -> "ValidatorRegistry":
        """Create a registry holding only the built-in validators."""
        return cls(builtin_validators())

    def register(self, validator: Any) -> Base:
        """Add a validator.

        Raises:
            ConfigurationError: If the object is not a validator or its
                name is already taken
        """
        if not conforms(validator):
            raise ConfigurationError("validators need to inherit from Base")

        with self._lock:
            if validator.name in self._validators:
                raise ConfigurationError("validators need to have unique names")
            table = dict(self._validators)
            table[validator.name] = validator
            self._validators = MappingProxyType(table)

        logger.debug(f"Registered validator '{validator.name}'")
        return validator

    def lookup(self, name: str) -> Base:
        """Get validator by rule name."""
        validator = self._validators.get(name)
        if validator is None:
            available = sorted(self._validators)
            raise ConfigurationError(f"unknown validator '{name}'. Available validators: {available}")
        return validator

    def names(self) -> List[str]:
        return sorted(self._validators)

    def __contains__(self, name: object) -> bool:
        return name in self._validators

    def __len__(self) -> int:
        return len(self._validators)


_default_registry: Optional[ValidatorRegistry] = None
_default_registry_lock = threading.Lock()


def default_registry() -> ValidatorRegistry:
    """Return the process-wide registry, installing built-ins on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = ValidatorRegistry.with_builtins()
                logger.debug(f"Initialized default registry with: {_default_registry.names()}")
    return _default_registry


def register_validator(
    validator: Any,
    predicate: Optional[Callable[[Any], bool]] = None,
    error_message: Optional[str] = None,
    registry: Optional[ValidatorRegistry] = None,
) -> Base:
    """Register a validator object, or a (name, predicate) pair via the builder.

    Args:
        validator: A validator object, or a rule name when ``predicate`` is given
        predicate: One-argument boolean function for ad-hoc rules
        error_message: Failure message for ad-hoc rules
        registry: Target registry (default: the process-wide registry)

    Returns:
        The registered validator
    """
    if predicate is not None:
        validator = build_validator(validator, predicate, error_message)
    elif error_message is not None:
        raise ConfigurationError("error_message is only accepted together with a predicate")

    target = registry if registry is not None else default_registry()
    return target.register(validator)


append_validator = register_validator
