"""High-resolution monotonic timestamps and waiting facilities."""

import time

MAX_BUSYWAIT_NS = 1_000_000_000
"""Longest busy-wait that :func:`busywait` accepts (one second)."""

_UINT32_MASK = 0xFFFFFFFF


def timestamp_raw() -> int:
    """Return a monotonic timestamp in nanoseconds."""
    return time.monotonic_ns()


def timestamp_us() -> int:
    """Return a monotonic timestamp scaled to microseconds."""
    return time.monotonic_ns() // 1_000


def timestamp_ms() -> int:
    """Return a monotonic timestamp in milliseconds, wrapped to 32 bits."""
    return (time.monotonic_ns() // 1_000_000) & _UINT32_MASK


def timestamp_unix() -> int:
    """Return the current Unix UTC time in whole seconds (not monotonic)."""
    return time.time_ns() // 1_000_000_000


def busywait(ns: int) -> None:
    """Spin the current thread for at least ``ns`` nanoseconds.

    Raises ValueError if ``ns`` is negative or exceeds MAX_BUSYWAIT_NS.
    """
    if ns < 0:
        raise ValueError(f"busywait duration must not be negative, got {ns}")
    if ns > MAX_BUSYWAIT_NS:
        raise ValueError(
            f"requested busywait of {ns} ns exceeds the limit of {MAX_BUSYWAIT_NS} ns"
        )
    start = time.monotonic_ns()
    while time.monotonic_ns() - start < ns:
        pass


def sleep(us: int) -> None:
    """Yield the thread to the OS scheduler for ``us`` microseconds."""
    if us < 0:
        raise ValueError(f"sleep duration must not be negative, got {us}")
    time.sleep(us / 1_000_000)