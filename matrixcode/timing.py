"""Wall-clock timestamps used for scan timeouts."""

import time
from dataclasses import dataclass

USEC_PER_SEC = 1_000_000
_TIME_PREC_USEC = 1


@dataclass(frozen=True, order=True)
class Timestamp:
    """A point in time as seconds and microseconds."""

    sec: int
    usec: int


def time_now():
    """Return the current time."""
    ns = time.time_ns()
    sec, rem = divmod(ns, 1_000_000_000)
    return Timestamp(sec, rem // 1000)


def time_add(t, msec):
    """Return ``t`` moved by ``msec`` milliseconds."""
    usec = msec * 1000
    if 0 < usec < _TIME_PREC_USEC:
        usec = _TIME_PREC_USEC
    extra_sec, new_usec = divmod(t.usec + usec, USEC_PER_SEC)
    return Timestamp(t.sec + extra_sec, new_usec)


def time_exceeded(timeout):
    """Return True once the current time is past ``timeout``."""
    return time_now() > timeout