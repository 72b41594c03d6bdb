import io
import statistics

import pytest

from anoptic.frametime import FRAME_WINDOW, FrameTimer, find_average


class _RecordingClock:
    def __init__(self, start, step):
        self.value = start
        self.step = step
        self.calls = []

    def __call__(self):
        now = self.value
        self.calls.append(now)
        self.value += self.step
        return now


def test_find_average_empty_is_zero():
    assert find_average([]) == 0.0


def test_find_average_small_list():
    assert find_average([2, 4, 6]) == 4.0


@pytest.mark.parametrize("values", [[1], [1, 2], [10, 20, 35, 7], list(range(199))])
def test_find_average_matches_mean(values):
    assert find_average(values) == pytest.approx(statistics.fmean(values))


def test_no_report_before_window_is_full():
    clock = _RecordingClock(5000, 1000)
    out = io.StringIO()
    timer = FrameTimer(clock, out)
    results = [timer.measure() for _ in range(FRAME_WINDOW - 1)]
    assert all(result is None for result in results)
    assert out.getvalue() == ""


def test_full_window_reports_frame_deltas():
    clock = _RecordingClock(5000, 1000)
    out = io.StringIO()
    timer = FrameTimer(clock, out)
    frames = None
    for _ in range(FRAME_WINDOW):
        frames = timer.measure()
    assert frames is not None and len(frames) == FRAME_WINDOW
    assert frames[: FRAME_WINDOW - 1] == [1000] * (FRAME_WINDOW - 1)
    # The last slot starts from zero on the first window.
    assert frames[-1] == clock.calls[-1]


def test_report_output_format():
    clock = _RecordingClock(0, 1000)
    out = io.StringIO()
    timer = FrameTimer(clock, out)
    for _ in range(FRAME_WINDOW):
        timer.measure()
    lines = out.getvalue().splitlines()
    assert len(lines) == FRAME_WINDOW + 1
    assert lines[0] == "Frame 0: 1000"
    assert lines[-1] == "Average frametime: 1.000000"


def test_second_window_uses_previous_last_stamp():
    clock = _RecordingClock(100, 250)
    timer = FrameTimer(clock, io.StringIO())
    for _ in range(FRAME_WINDOW):
        timer.measure()
    frames = None
    for _ in range(FRAME_WINDOW):
        frames = timer.measure()
    assert frames[: FRAME_WINDOW - 1] == [250] * (FRAME_WINDOW - 1)
    assert frames[-1] == clock.calls[-1] - clock.calls[FRAME_WINDOW - 1]


def test_default_output_is_stdout(capsys):
    clock = _RecordingClock(0, 500)
    timer = FrameTimer(clock)
    for _ in range(FRAME_WINDOW):
        timer.measure()
    captured = capsys.readouterr().out.splitlines()
    assert captured[1] == "Frame 1: 500"
    assert captured[-1].startswith("Average frametime: ")