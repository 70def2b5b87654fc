"""Logging setup for charsearch entrypoints.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed here, once, by whatever process hosts the repository (the MCP
server in this package).

Environment variables:
    CHARSEARCH_LOG_FILE: Path to a log file (rotated, replaces stderr output)
    CHARSEARCH_LOG_FORMAT: Custom log format string
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

DEFAULT_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Driver loggers that are chatty at DEBUG
_NOISY_LOGGERS = ("pymongo", "mcp", "httpx")


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    log_format: Optional[str] = None,
) -> None:
    """Configure the root logger.

    Args:
        level: Logging level, as a number or a name such as ``"DEBUG"``.
        log_file: Path to a log file. Falls back to ``CHARSEARCH_LOG_FILE``.
            When set, logs go to the file instead of stderr.
        log_format: Custom format. Falls back to ``CHARSEARCH_LOG_FORMAT``.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level = resolved if isinstance(resolved, int) else logging.INFO

    file_path = log_file or os.environ.get("CHARSEARCH_LOG_FILE")
    fmt = log_format or os.environ.get("CHARSEARCH_LOG_FORMAT")

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    if file_path:
        _setup_file_handler(root_logger, file_path, level, fmt)
    else:
        _setup_console_handler(root_logger, level, fmt)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.INFO))


def _setup_console_handler(logger: logging.Logger, level: int, fmt: Optional[str] = None) -> None:
    # stdout is reserved for the stdio MCP transport
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt or CONSOLE_LOG_FORMAT))
    logger.addHandler(handler)


def _setup_file_handler(
    logger: logging.Logger,
    file_path: str,
    level: int,
    fmt: Optional[str] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> None:
    log_path = Path(file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        file_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
    logger.addHandler(handler)
