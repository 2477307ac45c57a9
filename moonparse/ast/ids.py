"""Node identity allocation."""

import itertools
import threading
from typing import Final

type NodeId = int


class IdAllocator:
    """Issues unique, monotonically increasing node ids.

    Allocation is guarded by a lock so one allocator can be shared by parses
    running on different threads. Ids carry no positional meaning: nodes built
    during backtracking and then discarded still consume an id, so a finished
    tree may have gaps in its id sequence.
    """

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def allocate(self) -> NodeId:
        with self._lock:
            return next(self._counter)


DEFAULT_ID_ALLOCATOR: Final[IdAllocator] = IdAllocator()
"""Process-wide allocator used when a parse is not given one explicitly."""
