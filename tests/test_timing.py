import time
from unittest.mock import patch

import pytest

from meshkit.timing import PlatformTime, ScopeCycleCounter


def test_one_second_of_cycles_is_a_thousand_ms():
    assert PlatformTime.to_milliseconds(PlatformTime.frequency()) == pytest.approx(1000.0, rel=1e-6)


def test_zero_cycles_is_zero_ms():
    assert PlatformTime.to_milliseconds(0) == 0.0


def test_seconds_per_cycle_inverts_frequency():
    PlatformTime.init_timing()
    assert PlatformTime.seconds_per_cycle() * PlatformTime.frequency() == pytest.approx(1.0, rel=1e-6)


def test_cycles_are_monotonic():
    first = PlatformTime.cycles64()
    second = PlatformTime.cycles64()
    assert second >= first


def test_finish_counts_from_start():
    with patch("time.perf_counter_ns", side_effect=[100, 350]):
        counter = ScopeCycleCounter()
        assert counter.finish() == 250


def test_finish_grows():
    counter = ScopeCycleCounter()
    first = counter.finish()
    second = counter.finish()
    assert second >= first >= 0


def test_context_manager_measures_block():
    with ScopeCycleCounter() as counter:
        time.sleep(0.01)
    assert counter.cycles is not None
    assert counter.milliseconds >= 9.0


def test_milliseconds_before_finish_raises():
    with pytest.raises(RuntimeError):
        _ = ScopeCycleCounter().milliseconds