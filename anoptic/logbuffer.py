"""Buffered, thread-safe log message queue."""

import sys
import threading
from enum import IntEnum
from typing import List

LOG_PREFIX_MAX = 256
LOG_MESSAGE_MAX = 4096
LOG_BUFFER_MAX = 8192


class LogLevel(IntEnum):
    """Severity of a log message."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4


class LogBufferFull(Exception):
    """Raised when a message does not fit in the remaining buffer space."""


def build_log_string(level, file_name: str, line_number: int, fmt: str, *args) -> str:
    """Format a log line as ``LEVEL  file:line:   message``.

    ``fmt`` is a printf-style format applied to ``args``; the prefix, body
    and whole message are cut to the engine's size limits.
    """
    level = LogLevel(level)
    prefix = "%-6s %s:%d:  " % (level.name, file_name, line_number)
    prefix = prefix[: LOG_PREFIX_MAX - 1]
    body = (fmt % args)[: LOG_MESSAGE_MAX - LOG_PREFIX_MAX - 1]
    return f"{prefix} {body}"[: LOG_MESSAGE_MAX - 1]


_file_lock = threading.Lock()


def write_to_log_file(data: str, path) -> None:
    """Append already formatted ``data`` to the file at ``path``."""
    with _file_lock, open(path, "a", encoding="utf-8") as handle:
        handle.write(data)


class LogQueue:
    """A bounded queue of formatted log messages shared between threads.

    Each message takes its length plus one unit of the capacity.
    """

    def __init__(self, capacity: int = LOG_BUFFER_MAX) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._messages: List[str] = []
        self._tail = 0
        self._lock = threading.Lock()
        self._closed = False

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def used(self) -> int:
        """Buffer space currently taken by queued messages."""
        with self._lock:
            return self._tail

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError("log queue is closed")

    def enqueue(self, level, file_name: str, line_number: int, fmt: str, *args) -> str:
        """Format a message and add it to the queue; return the message.

        Raises LogBufferFull if it does not fit.
        """
        message = build_log_string(level, file_name, line_number, fmt, *args)
        with self._lock:
            self._check_open()
            if self._tail + len(message) >= self._capacity:
                raise LogBufferFull(
                    f"log buffer full: {self._tail} of {self._capacity} used, "
                    f"message needs {len(message) + 1}"
                )
            self._messages.append(message)
            self._tail += len(message) + 1
        return message

    def immediate(self, level, file_name: str, line_number: int, fmt: str, *args) -> str:
        """Print a message at once and drain the queue; return the message.

        Levels above WARN go to standard error, the rest to standard output.
        """
        level = LogLevel(level)
        message = build_log_string(level, file_name, line_number, fmt, *args)
        stream = sys.stderr if level > LogLevel.WARN else sys.stdout
        print(message, end="", file=stream)
        if not self._closed:
            self.flush()
        return message

    def flush(self) -> str:
        """Remove every queued message and return them joined by newlines."""
        with self._lock:
            self._check_open()
            text = "\n".join(self._messages)
            self._messages.clear()
            self._tail = 0
        return text

    def close(self) -> None:
        """Discard queued messages and refuse further use."""
        with self._lock:
            self._messages.clear()
            self._tail = 0
            self._closed = True

    def __enter__(self) -> "LogQueue":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()