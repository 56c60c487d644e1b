"""
Wall-clock source for the seat cycle.

Services never read the clock themselves; routes inject `now` through
the `get_clock` dependency so tests can pin time.
"""

import time
from typing import Callable

Clock = Callable[[], int]


def now_ms() -> int:
    """Current epoch time in whole milliseconds."""
    return int(time.time() * 1000)


def get_clock() -> Clock:
    return now_ms
