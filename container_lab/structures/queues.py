# container_lab/structures/queues.py
# FIFO queue, LIFO stack and double-ended queue over collections.deque.
# pop/peek on an empty container raise EmptyContainerError; poll returns None instead.
from __future__ import annotations
from collections import deque
from typing import Any, Optional

from ..core.errors import EmptyContainerError


class FIFOQueue:
    """First in, first out. With maxlen set, offer() refuses new items when full
    and push() (also used for the initial items) raises OverflowError."""
    def __init__(self, items=(), maxlen: Optional[int] = None):
        self.maxlen = maxlen
        self.q = deque()
        for x in items:
            self.push(x)
    def push(self, x):
        if not self.offer(x):
            raise OverflowError(f"FIFOQueue is full (maxlen={self.maxlen})")
    def offer(self, x) -> bool:
        if self.is_full():
            return False
        self.q.append(x)
        return True
    def pop(self):
        if not self.q:
            raise EmptyContainerError("FIFOQueue", "pop")
        return self.q.popleft()
    def poll(self): return self.q.popleft() if self.q else None
    def peek(self):
        if not self.q:
            raise EmptyContainerError("FIFOQueue", "peek")
        return self.q[0]
    def is_full(self) -> bool: return self.maxlen is not None and len(self.q) >= self.maxlen
    def __len__(self): return len(self.q)
    def __bool__(self): return bool(self.q)
    def __iter__(self): return iter(self.q)
    def __repr__(self): return f"FIFOQueue({list(self.q)!r})"


class LIFOStack:
    def __init__(self, items=()):
        self.q = list(items)
    def push(self, x): self.q.append(x)
    def pop(self):
        if not self.q:
            raise EmptyContainerError("LIFOStack", "pop")
        return self.q.pop()
    def poll(self): return self.q.pop() if self.q else None
    def peek(self):
        if not self.q:
            raise EmptyContainerError("LIFOStack", "peek")
        return self.q[-1]
    def __len__(self): return len(self.q)
    def __bool__(self): return bool(self.q)
    # top of the stack first, like Java's ArrayDeque used as a stack
    def __iter__(self): return reversed(self.q)
    def __repr__(self): return f"LIFOStack({list(self)!r})"


class Deque:
    """Both ends open. Usable as a stack (push_front/pop_front) or a queue (push_back/pop_front)."""
    def __init__(self, items=()):
        self.q = deque(items)

    def push_front(self, x): self.q.appendleft(x)
    def push_back(self, x): self.q.append(x)

    def pop_front(self):
        if not self.q:
            raise EmptyContainerError("Deque", "pop_front")
        return self.q.popleft()

    def pop_back(self):
        if not self.q:
            raise EmptyContainerError("Deque", "pop_back")
        return self.q.pop()

    def poll_front(self): return self.q.popleft() if self.q else None
    def poll_back(self): return self.q.pop() if self.q else None

    def peek_front(self) -> Any: return self.q[0] if self.q else None
    def peek_back(self) -> Any: return self.q[-1] if self.q else None

    def __len__(self): return len(self.q)
    def __bool__(self): return bool(self.q)
    def __iter__(self): return iter(self.q)
    def __repr__(self): return f"Deque({list(self.q)!r})"
