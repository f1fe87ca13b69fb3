"""
Scheduler - deferred one-shot actions drained by the frame clock.

Replaces host timers for the long-press timeout and the chorus stagger.
Entries are (fire_at, token, callback); the owner calls run_due(now) once
per frame and every entry whose fire_at <= now runs in fire_at order.
Entries with equal fire_at run in the order they were scheduled.
"""

import heapq
import itertools
from typing import Callable, List, Set, Tuple


class Scheduler:
    """Min-heap of pending callbacks keyed by fire time."""

    def __init__(self):
        self._heap: List[Tuple[float, int, Callable[[], None]]] = []
        self._counter = itertools.count()
        self._cancelled: Set[int] = set()

    def schedule(self, fire_at: float, callback: Callable[[], None]) -> int:
        """Queue callback to run at fire_at. Returns a cancellation token."""
        token = next(self._counter)
        heapq.heappush(self._heap, (fire_at, token, callback))
        return token

    def cancel(self, token: int) -> None:
        """Cancel a pending entry. Unknown or already-fired tokens are ignored."""
        if any(entry[1] == token for entry in self._heap):
            self._cancelled.add(token)

    def run_due(self, now: float) -> int:
        """
        Run every entry due at or before now.

        Callbacks may schedule further entries; those run in the same
        call if they are already due.

        Returns:
            Number of callbacks executed
        """
        fired = 0
        while self._heap and self._heap[0][0] <= now:
            _, token, callback = heapq.heappop(self._heap)
            if token in self._cancelled:
                self._cancelled.discard(token)
                continue
            callback()
            fired += 1
        return fired

    def clear(self) -> None:
        """Drop every pending entry."""
        self._heap.clear()
        self._cancelled.clear()

    @property
    def pending(self) -> int:
        """Number of live (not cancelled) entries."""
        return len(self._heap) - len(self._cancelled)
