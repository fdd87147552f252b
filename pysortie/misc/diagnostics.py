"""
Diagnostics sink shared by the database loader and its callers.

Collects (level, message) entries for the current generation run so the
caller can decide how to present them: count warnings, show the last error,
or dump the whole log to a file.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Type, Union

from .logger import INDENT, LogLevel, SortieLogger, create_logger


@dataclass(frozen=True)
class DiagnosticEntry:
    level: LogLevel
    message: str
    indent: int = 0
    # Warning subclass naming the kind of issue, when the writer gives one
    category: Optional[Type[Warning]] = None

    def format(self) -> str:
        tag = "" if self.level == LogLevel.INFO else f"{self.level.name}: "
        return f"{INDENT * self.indent}{tag}{self.message}"


class DiagnosticsLog:
    """
    Append-only, thread-safe message log.

    Each entry is also forwarded to a SortieLogger, so warnings and errors
    reach stderr even when nobody inspects the log.
    """

    def __init__(self, logger: Optional[SortieLogger] = None, verbose: bool = False):
        self.logger = logger or create_logger(verbose=verbose, name="Diagnostics")
        self._entries: List[DiagnosticEntry] = []
        self._lock = threading.Lock()

    def write(self, message: str, level: LogLevel = LogLevel.INFO, indent: int = 0,
              category: Optional[Type[Warning]] = None) -> DiagnosticEntry:
        entry = DiagnosticEntry(level, message, indent, category)
        with self._lock:
            self._entries.append(entry)
        self.logger.log(message, level, indent)
        return entry

    def info(self, message: str, indent: int = 0) -> DiagnosticEntry:
        return self.write(message, LogLevel.INFO, indent)

    def warning(self, message: str, indent: int = 0,
                category: Optional[Type[Warning]] = None) -> DiagnosticEntry:
        return self.write(message, LogLevel.WARNING, indent, category)

    def error(self, message: str, indent: int = 0) -> DiagnosticEntry:
        return self.write(message, LogLevel.ERROR, indent)

    @property
    def entries(self) -> List[DiagnosticEntry]:
        with self._lock:
            return list(self._entries)

    def _messages(self, level: LogLevel) -> List[str]:
        return [e.message for e in self.entries if e.level == level]

    @property
    def warnings(self) -> List[str]:
        return self._messages(LogLevel.WARNING)

    @property
    def errors(self) -> List[str]:
        return self._messages(LogLevel.ERROR)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def last_message(self) -> Optional[str]:
        with self._lock:
            return self._entries[-1].message if self._entries else None

    def clear(self):
        with self._lock:
            self._entries.clear()

    def export(self, path: Union[str, Path]) -> Path:
        """Write the log as plain text, one entry per line."""
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        lines = [entry.format() for entry in self.entries]
        out.write_text("\n".join(lines) + ("\n" if lines else ""), encoding="utf-8")
        return out

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
