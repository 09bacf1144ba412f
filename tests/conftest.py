from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hash_validator import ValidatorRegistry  # noqa: E402
from hash_validator.utils.logging_utils import PACKAGE_LOGGER  # noqa: E402


@pytest.fixture()
def registry() -> ValidatorRegistry:
    """Built-ins only, isolated from the process-wide registry."""
    return ValidatorRegistry.with_builtins()


@pytest.fixture()
def restore_package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
