import time
from unittest import mock

from jonoondb.stopwatch import Stopwatch


def test_fresh_stopwatch_is_not_running():
    sw = Stopwatch()
    assert sw.is_running is False
    assert sw.elapsed_microseconds() == sw.elapsed_seconds()
    assert sw.elapsed_milliseconds() == Stopwatch().elapsed_milliseconds()


def test_start_now_runs():
    sw = Stopwatch(start_now=True)
    assert sw.is_running is True


def test_accumulates_intervals():
    clock = [1_000_000_000, 2_000_000_000, 5_000_000_000, 6_500_000_000]
    with mock.patch.object(time, "perf_counter_ns", side_effect=clock):
        sw = Stopwatch()
        sw.start()
        sw.stop()
        sw.start()
        sw.stop()
    assert sw.elapsed_milliseconds() == 2500
    assert sw.elapsed_seconds() == 2
    assert sw.elapsed_microseconds() // 1000 == sw.elapsed_milliseconds()


def test_running_elapsed_uses_current_time():
    clock = [1_000_000_000, 1_000_250_000]
    with mock.patch.object(time, "perf_counter_ns", side_effect=clock):
        sw = Stopwatch(start_now=True)
        assert sw.elapsed_microseconds() == 250


def test_start_and_stop_are_idempotent():
    clock = [10_000_000_000, 13_000_000_000]
    with mock.patch.object(time, "perf_counter_ns", side_effect=clock) as now:
        sw = Stopwatch()
        sw.start()
        sw.start()
        sw.stop()
        sw.stop()
        assert now.call_count == len(clock)
    assert sw.elapsed_milliseconds() == sw.elapsed_seconds() * 1000


def test_reset_clears_time():
    clock = [1_000_000_000, 4_000_000_000]
    with mock.patch.object(time, "perf_counter_ns", side_effect=clock):
        sw = Stopwatch()
        sw.start()
        sw.stop()
    assert sw.elapsed_seconds() > Stopwatch().elapsed_seconds()
    sw.reset()
    assert sw.is_running is False
    assert sw.elapsed_microseconds() == Stopwatch().elapsed_microseconds()


def test_restart_discards_previous_time():
    clock = [0, 9_000_000_000, 20_000_000_000, 20_000_000_000]
    with mock.patch.object(time, "perf_counter_ns", side_effect=clock):
        sw = Stopwatch()
        sw.start()
        sw.stop()
        sw.restart()
        assert sw.is_running is True
        assert sw.elapsed_microseconds() == Stopwatch().elapsed_microseconds()


def test_real_clock_is_monotonic():
    sw = Stopwatch(start_now=True)
    first = sw.elapsed_microseconds()
    time.sleep(0.002)
    second = sw.elapsed_microseconds()
    assert second >= first
    sw.stop()
    frozen = sw.elapsed_microseconds()
    time.sleep(0.002)
    assert sw.elapsed_microseconds() == frozen