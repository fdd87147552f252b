"""
Console logger for pysortie.

Lines look like ``[pysortie] [Database] Warning: ...``. Progress lines
(INFO, DEBUG) only print in verbose mode; warnings and errors always go to
stderr.
"""

import sys
from enum import Enum
from typing import Optional

# Nesting step for progress lines ("Loading..." then its details)
INDENT = "  "


class LogLevel(Enum):
    """Log level enumeration."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


_LEVEL_TAGS = {
    LogLevel.DEBUG: "DEBUG:",
    LogLevel.INFO: "",
    LogLevel.WARNING: "Warning:",
    LogLevel.ERROR: "ERROR:",
}


class SortieLogger:
    """
    Prefixed console logger for one component.

    Usage:
        logger = SortieLogger(verbose=True, name="Database")
        logger.info("Loading common names settings...")
        logger.debug("Names.ini: 74 keys in 4 sections", indent=1)
        logger.warning("File \"Include/Ogg/radio0.ogg\" doesn't exist.", indent=1)
    """

    def __init__(self, verbose: bool = True, name: Optional[str] = None):
        self.verbose = verbose
        self.name = name

    @property
    def prefix(self) -> str:
        return f"[pysortie] [{self.name}]" if self.name else "[pysortie]"

    def format(self, level: LogLevel, message: str, indent: int = 0) -> str:
        tag = _LEVEL_TAGS[level]
        head = f"{self.prefix} {tag}" if tag else self.prefix
        return f"{head} {INDENT * indent}{message}"

    def log(self, message: str, level: LogLevel = LogLevel.INFO, indent: int = 0):
        if level in (LogLevel.WARNING, LogLevel.ERROR):
            stream = sys.stderr
        elif self.verbose:
            stream = sys.stdout
        else:
            return
        print(self.format(level, message, indent), file=stream)

    def debug(self, message: str, indent: int = 0):
        self.log(message, LogLevel.DEBUG, indent)

    def info(self, message: str, indent: int = 0):
        self.log(message, LogLevel.INFO, indent)

    def warning(self, message: str, indent: int = 0):
        self.log(message, LogLevel.WARNING, indent)

    def error(self, message: str, indent: int = 0):
        self.log(message, LogLevel.ERROR, indent)


def create_logger(verbose: bool = True, name: Optional[str] = None) -> SortieLogger:
    """
    Factory function to create a logger instance.

    Args:
        verbose: If False, only warnings and errors are printed
        name: Component name (e.g., "Database", "Diagnostics")
    """
    return SortieLogger(verbose=verbose, name=name)
