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

"""Custom exceptions for the hash validator."""


class HashValidatorError(Exception):
    """Base exception for hash-validator related errors."""
    pass


class ConfigurationError(HashValidatorError):
    """Exception raised for registry and schema setup mistakes."""
    pass


class SchemaValidationError(HashValidatorError):
    """Exception raised when a caller opts into raising on an invalid result."""

    def __init__(self, message: str, result=None):
        super().__init__(message)
        self.result = result
