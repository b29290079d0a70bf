"""Logging configuration for MetaSight.

Reports are printed on stdout, so log records go to stderr and, when a
path is given, to a log file as well.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# HTTP client libraries log every request at INFO or DEBUG
QUIET_LOGGERS = ("urllib3", "httpx", "httpcore")


def _numeric_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).upper(), None)
    return value if isinstance(value, int) else logging.INFO


def setup_logging(
    level: Union[str, int] = "INFO",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
) -> None:
    """Configure the root logger.

    Args:
        level: Level name (case-insensitive) or number; unknown names mean INFO
        log_file: Optional log file path, parent directories are created
        format_string: Optional record format
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    logging.basicConfig(
        level=_numeric_level(level),
        format=format_string or DEFAULT_FORMAT,
        handlers=handlers,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
