from unittest import mock

from matrixcode.timing import Timestamp, time_add, time_exceeded, time_now


def test_time_now_fields_in_range():
    now = time_now()
    assert now.sec > 0
    assert 0 <= now.usec < 1_000_000


@mock.patch("time.time_ns", return_value=1_234_567_890_123_456_789)
def test_time_now_converts_nanoseconds(_mocked):
    assert time_now() == Timestamp(1_234_567_890, 123_456)


def test_time_add_zero_is_identity():
    t = Timestamp(10, 250_000)
    assert time_add(t, 0) == t


def test_time_add_rolls_over():
    assert time_add(Timestamp(1, 999_999), 1) == Timestamp(2, 999)


def test_time_add_keeps_total_difference():
    t = Timestamp(100, 700_000)
    for msec in (1, 999, 2500, 123_456):
        r = time_add(t, msec)
        assert 0 <= r.usec < 1_000_000
        assert (r.sec - t.sec) * 1_000_000 + (r.usec - t.usec) == msec * 1000


def test_time_add_negative_round_trip():
    t = Timestamp(50, 100)
    assert time_add(time_add(t, -1500), 1500) == t


def test_ordering():
    t = Timestamp(5, 500)
    assert time_add(t, 1) > t
    assert time_add(t, -1) < t


def test_time_exceeded_past_and_future():
    assert time_exceeded(time_add(time_now(), -1000)) is True
    assert time_exceeded(time_add(time_now(), 60_000)) is False