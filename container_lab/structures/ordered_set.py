# container_lab/structures/ordered_set.py
# Sorted set (Java TreeSet / NavigableSet style): an ordered map whose values are a unit marker.
from __future__ import annotations

from collections.abc import MutableSet
from typing import Any, Callable, Iterable, Iterator, List, Optional

from ..core.errors import EmptyContainerError, InvalidRangeError
from ..core.ordering import Comparator, resolve, reverse_order
from .red_black import RedBlackTree

_PRESENT = object()  # unit value stored for every member


class OrderedSet(MutableSet):
    """Set iterated in comparator order; views are snapshot lists of keys.

    Unlike set.remove, remove() returns False for a missing item instead of
    raising KeyError.
    """

    def __init__(
        self,
        items: Optional[Iterable[Any]] = None,
        cmp: Optional[Comparator] = None,
        key: Optional[Callable[[Any], Any]] = None,
        check_invariants: Optional[bool] = None,
    ):
        self._tree = RedBlackTree(resolve(cmp, key), check_invariants=check_invariants)
        if items is not None:
            for item in items:
                self._tree.insert(item, _PRESENT)

    @property
    def comparator(self) -> Comparator:
        return self._tree.cmp

    @property
    def tree(self) -> RedBlackTree:
        """The backing red-black tree (for plotting and invariant checks)."""
        return self._tree

    def add(self, item) -> bool:
        """Returns False (and keeps the stored member) if an equal item is present."""
        if self._tree.find(item) is not None:
            return False
        return self._tree.insert(item, _PRESENT)

    def remove(self, item) -> bool:
        return self._tree.delete(item)

    def discard(self, item) -> None:
        self._tree.delete(item)

    def contains(self, item) -> bool:
        return self._tree.find(item) is not None

    def first(self):
        node = self._tree.minimum()
        if node is None:
            raise EmptyContainerError("OrderedSet", "first")
        return node.key

    def last(self):
        node = self._tree.maximum()
        if node is None:
            raise EmptyContainerError("OrderedSet", "last")
        return node.key

    def pop_first(self):
        node = self._tree.minimum()
        if node is None:
            raise EmptyContainerError("OrderedSet", "pop_first")
        self._tree.delete_node(node)
        return node.key

    def pop_last(self):
        node = self._tree.maximum()
        if node is None:
            raise EmptyContainerError("OrderedSet", "pop_last")
        self._tree.delete_node(node)
        return node.key

    # MutableSet.pop removes an arbitrary element; here it is the smallest.
    def pop(self):
        return self.pop_first()

    def floor(self, item):
        return _key(self._tree.floor(item))

    def ceiling(self, item):
        return _key(self._tree.ceiling(item))

    def lower(self, item):
        return _key(self._tree.lower(item))

    def higher(self, item):
        return _key(self._tree.higher(item))

    def head_view(self, bound, inclusive: bool = False) -> List[Any]:
        return [n.key for n in self._tree.iter_range(None, bound, high_inclusive=inclusive)]

    def tail_view(self, bound, inclusive: bool = True) -> List[Any]:
        return [n.key for n in self._tree.iter_range(bound, None, low_inclusive=inclusive)]

    def range_view(self, low, high) -> List[Any]:
        return self.sub_view(low, high)

    def sub_view(self, low, high, low_inclusive: bool = True, high_inclusive: bool = False) -> List[Any]:
        if self.comparator(low, high) > 0:
            raise InvalidRangeError(low, high)
        return [n.key for n in self._tree.iter_range(low, high, low_inclusive, high_inclusive)]

    def iterate(self, ascending: bool = True) -> Iterator[Any]:
        for node in self._tree.iter_nodes(ascending):
            yield node.key

    def descending_set(self) -> "OrderedSet":
        return OrderedSet(self.iterate(ascending=False), cmp=reverse_order(self.comparator))

    def union(self, other: Iterable[Any]) -> "OrderedSet":
        result = self.copy()
        for item in other:
            result.add(item)
        return result

    def intersection(self, other: Iterable[Any]) -> "OrderedSet":
        if not isinstance(other, (OrderedSet, set, frozenset)):
            other = list(other)
        return OrderedSet((x for x in self if x in other), cmp=self.comparator)

    def difference(self, other: Iterable[Any]) -> "OrderedSet":
        result = self.copy()
        for item in other:
            result.discard(item)
        return result

    def copy(self) -> "OrderedSet":
        return OrderedSet(self.iterate(), cmp=self.comparator)

    def clear(self) -> None:
        self._tree.clear()

    # collections.abc calls this for |, &, -, ^ so results keep our comparator
    def _from_iterable(self, it):
        return OrderedSet(it, cmp=self.comparator)

    def __contains__(self, item):
        return self.contains(item)

    def __iter__(self):
        return self.iterate()

    def __reversed__(self):
        return self.iterate(ascending=False)

    def __len__(self):
        return len(self._tree)

    def __repr__(self):
        return f"OrderedSet([{', '.join(repr(x) for x in self)}])"


def _key(node):
    return None if node is None else node.key
