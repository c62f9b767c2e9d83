"""Leveled, thread-safe application logger writing to the console and an optional file."""

from __future__ import annotations

import sys
import threading
from datetime import datetime
from enum import IntEnum
from typing import TextIO

DEFAULT_LOG_FILE = "application.log"


class LogLevel(IntEnum):
    """Severity of a log message, in increasing order."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    CRITICAL = 3
    FATAL = 4


def level_name(level: int) -> str:
    """Return the printable name of a level, or ``UNKNOWN`` for any other value."""
    try:
        return LogLevel(level).name
    except ValueError:
        return "UNKNOWN"


def _timestamp() -> str:
    now = datetime.now()
    return f"{now:%Y-%m-%d %H:%M:%S}.{now.microsecond // 1000:03d}"


class Logger:
    """Writes ``[timestamp] [LEVEL] message`` lines to the console and, optionally, a file."""

    _instance: Logger | None = None
    _instance_lock = threading.Lock()

    def __init__(self, stream: TextIO | None = None) -> None:
        self._level = LogLevel.DEBUG
        self._stream = stream
        self._file: TextIO | None = None
        self._file_path: str | None = None
        self._lock = threading.RLock()

    @staticmethod
    def instance() -> Logger:
        """Return the process-wide shared logger."""
        with Logger._instance_lock:
            if Logger._instance is None:
                Logger._instance = Logger()
            return Logger._instance

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def logging_to_file(self) -> bool:
        return self._file is not None

    @property
    def log_file_path(self) -> str | None:
        return self._file_path if self._file is not None else None

    def set_log_level(self, level: int) -> None:
        """Drop every message below ``level`` from now on."""
        with self._lock:
            self._level = LogLevel(level)

    def set_log_to_file(self, enabled: bool, file_path: str = DEFAULT_LOG_FILE) -> bool:
        """Start or stop appending log lines to ``file_path``.

        Returns whether file logging is active afterwards; a file that cannot be
        opened is reported on stderr and leaves file logging off.
        """
        with self._lock:
            self._close_file()
            if not enabled:
                return False
            try:
                self._file = open(file_path, "a", encoding="utf-8")
            except OSError:
                print(f"Failed to open log file: {file_path}", file=sys.stderr)
                return False
            self._file_path = str(file_path)
            return True

    def debug(self, message: str) -> None:
        self.log(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(LogLevel.INFO, message)

    def warning(self, message: str) -> None:
        self.log(LogLevel.WARNING, message)

    def critical(self, message: str) -> None:
        self.log(LogLevel.CRITICAL, message)

    def fatal(self, message: str) -> None:
        self.log(LogLevel.FATAL, message)

    def log(self, level: int, message: str) -> None:
        """Write ``message`` at ``level`` unless it is below the current threshold."""
        if level < self._level:
            return
        line = f"[{_timestamp()}] [{level_name(level)}] {message}"
        with self._lock:
            stream = sys.stdout if self._stream is None else self._stream
            print(line, file=stream, flush=True)
            if self._file is not None:
                self._file.write(line + "\n")
                self._file.flush()

    def close(self) -> None:
        """Stop writing to the log file, if one is open."""
        with self._lock:
            self._close_file()

    def _close_file(self) -> None:
        if self._file is not None:
            self._file.close()
        self._file = None
        self._file_path = None

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()