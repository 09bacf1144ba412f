import logging
import sys
from typing import Optional, Tuple

PACKAGE_LOGGER = "hash_validator"
DEFAULT_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class _BelowLevelFilter(logging.Filter):
    """Pass records strictly below ``level``."""

    def __init__(self, level: int) -> None:
        super().__init__()
        self._level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._level


def _stream_handler(stream, level: int, formatter: logging.Formatter) -> logging.StreamHandler:
    handler = logging.StreamHandler(stream=stream)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    logger_name: Optional[str] = PACKAGE_LOGGER,
) -> Tuple[logging.Handler, logging.Handler]:
    """Send validator log records to the terminal.

    Records below ``stderr_level`` go to stdout, the rest to stderr. The
    library never installs handlers by itself; applications call this to
    see the per-field DEBUG trace of the engine.

    When a named logger is configured it stops propagating, so a handler
    the application put on the root logger does not print each record a
    second time. ``logger_name=None`` configures the root logger.

    Returns:
        The (stdout, stderr) handlers that were installed
    """
    target = logging.getLogger(logger_name)
    target.handlers.clear()
    target.setLevel(level)
    if logger_name is not None:
        target.propagate = False

    formatter = formatter or logging.Formatter(DEFAULT_FORMAT)
    stderr_level = max(stderr_level, logging.DEBUG)

    stdout_handler = _stream_handler(sys.stdout, logging.DEBUG, formatter)
    stdout_handler.addFilter(_BelowLevelFilter(stderr_level))
    stderr_handler = _stream_handler(sys.stderr, stderr_level, formatter)

    target.addHandler(stdout_handler)
    target.addHandler(stderr_handler)
    return stdout_handler, stderr_handler
