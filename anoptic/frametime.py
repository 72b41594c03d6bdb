"""Frame-time measurement over a fixed window of frames."""

import sys
from typing import Callable, Iterable, List, Optional, TextIO

from .timing import timestamp_us

FRAME_WINDOW = 200


def find_average(values: Iterable[float]) -> float:
    """Return the arithmetic mean of ``values``, or 0.0 when empty."""
    items = list(values)
    if not items:
        return 0.0
    return sum(items) / len(items)


class FrameTimer:
    """Collects per-frame durations and reports them every FRAME_WINDOW frames."""

    def __init__(
        self,
        clock: Optional[Callable[[], int]] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self._clock = clock if clock is not None else timestamp_us
        self._output = output
        self._frames: List[int] = [0] * FRAME_WINDOW
        self._index = 0

    def measure(self) -> Optional[List[int]]:
        """Record one frame boundary.

        Returns the frame times when a full window has been reported,
        otherwise None.
        """
        now = self._clock()
        last = FRAME_WINDOW - 1

        if self._index > 0:
            self._frames[self._index - 1] = now - self._frames[self._index - 1]

        if self._index == last:
            self._frames[last] = now - self._frames[last]
            self._report()
            self._index = 0
            return list(self._frames)

        self._frames[self._index] = now
        self._index += 1
        return None

    def _report(self) -> None:
        stream = self._output if self._output is not None else sys.stdout
        for number, duration in enumerate(self._frames):
            print(f"Frame {number}: {duration}", file=stream)
        average = find_average(self._frames[: FRAME_WINDOW - 1]) / 1000
        print(f"Average frametime: {average:f}", file=stream)