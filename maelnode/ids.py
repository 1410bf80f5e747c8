from __future__ import annotations
import itertools


class MessageIdGenerator:
    """
    Per-runtime msg_id source: 1, 2, 3, ...
    itertools.count advances in a single C call, so concurrent next() calls
    never observe the same value and no lock sits on the reply path.
    """

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._last = start - 1

    def next(self) -> int:
        value = next(self._counter)
        # best-effort only, used for diagnostics
        if value > self._last:
            self._last = value
        return value

    @property
    def last(self) -> int:
        return self._last
