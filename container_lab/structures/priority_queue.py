# container_lab/structures/priority_queue.py
from __future__ import annotations

import heapq
import logging
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Iterator, List, Optional

from ..core import config
from ..core.errors import EmptyContainerError
from ..core.ordering import Comparator

logger = logging.getLogger(__name__)


class PriorityQueue:
    """
    Binary min-heap over a dense list, ordered by `cmp` or `key`.

    The top is the element no other element sorts before. Pass
    cmp=reverse_order() for max-first, or key=lambda t: t.priority for
    scheduling by an attribute. Heap entries are (sort_key, seq, item); seq is
    an insertion counter, so equal priorities come out first-in first-out and
    items themselves are never compared.
    """

    def __init__(
        self,
        items: Iterable[Any] = (),
        cmp: Optional[Comparator] = None,
        key: Optional[Callable[[Any], Any]] = None,
        check_invariants: Optional[bool] = None,
    ):
        if cmp is not None and key is not None:
            raise ValueError("pass either cmp or key, not both")
        if cmp is not None:
            self.key = cmp_to_key(cmp)
        else:
            self.key = key or (lambda x: x)
        self.h: List[tuple] = []
        self.counter = 0  # tie-breaker for stability
        self.check_invariants = config.CHECK_INVARIANTS if check_invariants is None else check_invariants
        for x in items:
            self.counter += 1
            self.h.append((self.key(x), self.counter, x))
        heapq.heapify(self.h)

    def insert(self, x) -> None:
        self.counter += 1
        heapq.heappush(self.h, (self.key(x), self.counter, x))
        if self.check_invariants:
            self.check()

    push = insert

    def peek(self):
        if not self.h:
            raise EmptyContainerError("PriorityQueue", "peek")
        return self.h[0][2]

    def extract_top(self):
        if not self.h:
            raise EmptyContainerError("PriorityQueue", "extract_top")
        item = heapq.heappop(self.h)[2]
        if self.check_invariants:
            self.check()
        return item

    pop = extract_top

    def is_empty(self) -> bool: return not self.h
    def size(self) -> int: return len(self.h)
    def __len__(self): return len(self.h)
    def __bool__(self): return bool(self.h)

    def __contains__(self, x):
        return any(entry[2] == x for entry in self.h)

    def remove(self, x) -> bool:
        """Remove one element equal to x. O(n): linear scan plus re-heapify."""
        for i, entry in enumerate(self.h):
            if entry[2] == x:
                last = self.h.pop()
                if i < len(self.h):
                    self.h[i] = last
                    heapq.heapify(self.h)
                logger.debug("removed %r from heap slot %d", x, i)
                if self.check_invariants:
                    self.check()
                return True
        return False

    def clear(self) -> None:
        self.h.clear()

    def drain(self) -> Iterator[Any]:
        """Pop everything in priority order."""
        while self.h:
            yield heapq.heappop(self.h)[2]

    def to_list(self) -> List[Any]:
        """Items in heap (array) order, not priority order."""
        return [entry[2] for entry in self.h]

    def sorted_items(self) -> List[Any]:
        return [entry[2] for entry in sorted(self.h)]

    def check(self) -> None:
        h = self.h
        for i in range(1, len(h)):
            parent = (i - 1) // 2
            if h[i] < h[parent]:
                raise AssertionError(f"heap order violated at slot {i} (parent {parent})")
        logger.debug("heap check ok: %d entries", len(h))

    def __repr__(self):
        return f"PriorityQueue({self.to_list()!r})"
