# container_lab/core/ordering.py
# Comparators shared by the ordered tree and the priority queue.
# A comparator is cmp(a, b) -> negative / zero / positive, like Java's compareTo.
from __future__ import annotations
from typing import Any, Callable, Optional

Comparator = Callable[[Any, Any], int]


def natural_order(a, b) -> int:
    return (a > b) - (a < b)


def reverse_order(cmp: Optional[Comparator] = None) -> Comparator:
    """Invert a comparator (natural order if none given)."""
    base = cmp or natural_order

    def reversed_cmp(a, b) -> int:
        return base(b, a)

    return reversed_cmp


def comparing(key: Callable[[Any], Any], reverse: bool = False) -> Comparator:
    """Comparator on key(x), e.g. comparing(lambda t: t.priority, reverse=True)."""
    def key_cmp(a, b) -> int:
        return natural_order(key(a), key(b))

    return reverse_order(key_cmp) if reverse else key_cmp


def resolve(cmp: Optional[Comparator] = None, key: Optional[Callable[[Any], Any]] = None) -> Comparator:
    if cmp is not None and key is not None:
        raise ValueError("pass either cmp or key, not both")
    if key is not None:
        return comparing(key)
    return cmp or natural_order
