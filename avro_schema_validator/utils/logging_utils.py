import logging
import sys
from typing import Optional, TextIO


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self._max_level


def parse_level(name: Optional[str], default: int) -> int:
    """Map a level name such as ``"debug"`` to its ``logging`` constant."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def _stream_handler(
    stream: TextIO,
    level: int,
    formatter: logging.Formatter,
    max_level: Optional[int] = None,
) -> logging.Handler:
    handler = logging.StreamHandler(stream=stream)
    handler.setLevel(level)
    if max_level is not None:
        handler.addFilter(_MaxLevelFilter(max_level))
    handler.setFormatter(formatter)
    return handler


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
) -> None:
    """Configure root logging so that records below ``stderr_level`` go to
    stdout and the rest to stderr.

    Passing ``stderr_level=logging.DEBUG`` sends every record to stderr,
    leaving stdout free for machine-readable reports.
    """
    if formatter is None:
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")
    stderr_level = max(stderr_level, logging.DEBUG)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(_stream_handler(sys.stdout, logging.DEBUG, formatter, max_level=stderr_level - 1))
    root.addHandler(_stream_handler(sys.stderr, stderr_level, formatter))
