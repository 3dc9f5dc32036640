# src/astarte_generators/core/unique.py
"""Process-wide unique integers.

The counter starts at 1 when this module is imported and is never reset,
so every call in the lifetime of the process observes a new value. It is
the only mutable state shared between draws.
"""

import itertools
import threading

_lock = threading.Lock()
_counter = itertools.count(1)


def unique_integer() -> int:
    """Increment the process-wide counter and return the new value.

    Safe to call from any thread; two calls never return the same value.
    """
    with _lock:
        return next(_counter)
