import pytest

from stacker.utils.interval_timer import IntervalTimer


def test_timer_fires_once_per_period():
    timer = IntervalTimer(interval_ms=100)

    assert timer.advance(0.05) == 0
    assert timer.advance(0.06) == 1
    assert timer.elapsed_ms == pytest.approx(10.0)


def test_timer_reports_multiple_periods_for_long_frame():
    timer = IntervalTimer(interval_ms=100)

    assert timer.advance(0.355) == 3
    assert timer.elapsed_ms == pytest.approx(55.0)


def test_cancelled_timer_never_fires():
    timer = IntervalTimer(interval_ms=100)
    timer.advance(0.09)
    timer.cancel()
    timer.cancel()

    assert not timer.active
    assert timer.advance(1.0) == 0
    assert timer.elapsed_ms == 0.0


def test_non_positive_dt_is_ignored():
    timer = IntervalTimer(interval_ms=100)

    assert timer.advance(0.0) == 0
    assert timer.advance(-1.0) == 0
    assert timer.elapsed_ms == 0.0


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        IntervalTimer(interval_ms=0)
