from __future__ import annotations

"""
Logging Settings for nametree.

The CLI builds a LoggingConfig from its --debug and --log-file switches;
library modules never read it and only emit through their module loggers.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Level names accepted in LoggingConfig.level, case-insensitive
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Where nametree diagnostics go and how verbose they are.

    Refused tree edits (children on a soft link, re-parenting) surface at
    ERROR, description warnings at WARNING and lookup tracing at DEBUG, so
    the WARNING default keeps query output clean.

    Attributes:
        level: Level name; unknown names fall back to WARNING.
        console: Write records to stderr.
        log_file: Rotated log file, off when None.
        max_bytes: Size at which log_file rolls over.
        backup_count: Rolled-over files kept next to log_file.
        console_fmt: Record format on stderr.
        file_fmt: Record format in log_file, with timestamp and logger name.
        datefmt: Timestamp format for file_fmt.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
