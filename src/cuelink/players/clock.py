"""
Wall-clock access for link timestamps and id generation.

Functions that stamp a time take a ``clock`` argument so tests can pass
a fixed or stepping clock instead of reading the real time.
"""

import time
from typing import Callable

# Zero-argument callable returning epoch milliseconds
Clock = Callable[[], int]


def now_ms() -> int:
    """Current time as integer epoch milliseconds."""
    return time.time_ns() // 1_000_000
