import logging
import sys
from typing import Optional, TextIO


class _BelowLevelFilter(logging.Filter):
    """Pass only records strictly below ``level``."""

    def __init__(self, level: int) -> None:
        super().__init__()
        self._level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._level


def _stream_handler(stream: TextIO, level: int, formatter: logging.Formatter) -> logging.StreamHandler:
    handler = logging.StreamHandler(stream=stream)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def configure_split_stream_logging(
    *,
    logger_name: Optional[str] = None,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
) -> logging.Logger:
    """Route validator logs to two streams.

    Phase progress (below ``stderr_level``) is written to stdout, next to
    the deploy tool's own output. Descriptor problems and fatal precondition
    failures (``stderr_level`` and above) go to stderr so they remain visible
    when the tool redirects stdout. Existing handlers on the logger are
    replaced.

    Returns:
        The configured logger (root when ``logger_name`` is None)
    """
    if formatter is None:
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")
    stderr_level = max(stderr_level, logging.DEBUG)

    progress_handler = _stream_handler(sys.stdout, logging.DEBUG, formatter)
    progress_handler.addFilter(_BelowLevelFilter(stderr_level))
    problem_handler = _stream_handler(sys.stderr, stderr_level, formatter)

    target = logging.getLogger(logger_name)
    target.handlers.clear()
    target.setLevel(level)
    target.addHandler(progress_handler)
    target.addHandler(problem_handler)

    return target
