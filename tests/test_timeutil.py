import time

import pytest

from eglite.timeutil import TimeVal, get_current_time, usleep


def test_current_time_is_close_to_system_time():
    before = time.time()
    now = get_current_time()
    after = time.time()
    assert before - 1 <= now.to_seconds() <= after + 1


def test_current_time_microseconds_in_range():
    now = get_current_time()
    assert 0 <= now.tv_usec < 1_000_000
    assert now.tv_sec > 0


def test_current_time_does_not_go_backwards_much():
    first = get_current_time()
    second = get_current_time()
    assert (second.tv_sec, second.tv_usec) >= (first.tv_sec, first.tv_usec) or (
        first.to_seconds() - second.to_seconds() < 1
    )


def test_timeval_to_seconds():
    assert TimeVal(3, 500000).to_seconds() == 3.5


def test_usleep_waits_at_least_requested():
    start = get_current_time()
    usleep(20000)
    end = get_current_time()
    assert end.to_seconds() - start.to_seconds() >= 0.019


def test_usleep_zero_returns_quickly():
    start = get_current_time()
    usleep(0)
    end = get_current_time()
    assert end.to_seconds() - start.to_seconds() < 1


def test_usleep_negative_raises():
    with pytest.raises(ValueError):
        usleep(-1)