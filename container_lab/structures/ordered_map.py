# container_lab/structures/ordered_map.py
# Sorted key -> value map (Java TreeMap / NavigableMap style) on top of RedBlackTree.
from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

from ..core.errors import EmptyContainerError, InvalidRangeError
from ..core.ordering import Comparator, resolve, reverse_order
from .red_black import RedBlackTree

logger = logging.getLogger(__name__)

Entry = Tuple[Any, Any]


class OrderedMap(MutableMapping):
    """
    Map whose iteration order follows a comparator over the keys.

    Navigation (floor/ceiling/lower/higher) returns a key or None; first/last
    raise EmptyContainerError on an empty map. head_view/tail_view/range_view
    return snapshot lists of (key, value) pairs taken at call time, so later
    mutations never show up in a view already returned. iterate() is lazy and
    raises RuntimeError if the map is resized while it is being consumed.
    """

    def __init__(
        self,
        items: Optional[Iterable[Entry]] = None,
        cmp: Optional[Comparator] = None,
        key: Optional[Callable[[Any], Any]] = None,
        check_invariants: Optional[bool] = None,
    ):
        self._tree = RedBlackTree(resolve(cmp, key), check_invariants=check_invariants)
        if items is not None:
            if hasattr(items, "items"):
                items = items.items()
            n = 0
            for k, v in items:
                self._tree.insert(k, v)
                n += 1
            logger.debug("loaded %d entries (%d distinct keys)", n, len(self._tree))

    @property
    def comparator(self) -> Comparator:
        return self._tree.cmp

    @property
    def tree(self) -> RedBlackTree:
        """The backing red-black tree (for plotting and invariant checks)."""
        return self._tree

    # ---- core contract ---------------------------------------------------------
    def insert(self, key, value) -> None:
        """Add key -> value, overwriting the value if the key is already present."""
        self._tree.insert(key, value)

    def remove(self, key) -> bool:
        return self._tree.delete(key)

    def get(self, key, default=None):
        node = self._tree.find(key)
        return default if node is None else node.value

    def get_or_default(self, key, default):
        return self.get(key, default)

    def contains_key(self, key) -> bool:
        return self._tree.find(key) is not None

    def contains_value(self, value) -> bool:
        return any(node.value == value for node in self._tree.iter_nodes())

    def put_if_absent(self, key, value):
        """Insert only if missing. Returns the value already stored, or None."""
        node = self._tree.find(key)
        if node is not None:
            return node.value
        self._tree.insert(key, value)
        return None

    def first(self) -> Entry:
        node = self._tree.minimum()
        if node is None:
            raise EmptyContainerError("OrderedMap", "first")
        return node.key, node.value

    def last(self) -> Entry:
        node = self._tree.maximum()
        if node is None:
            raise EmptyContainerError("OrderedMap", "last")
        return node.key, node.value

    def first_key(self):
        return self.first()[0]

    def last_key(self):
        return self.last()[0]

    def first_entry(self) -> Optional[Entry]:
        return self._entry(self._tree.minimum())

    def last_entry(self) -> Optional[Entry]:
        return self._entry(self._tree.maximum())

    def pop_first(self) -> Entry:
        node = self._tree.minimum()
        if node is None:
            raise EmptyContainerError("OrderedMap", "pop_first")
        entry = node.key, node.value
        self._tree.delete_node(node)
        return entry

    def pop_last(self) -> Entry:
        node = self._tree.maximum()
        if node is None:
            raise EmptyContainerError("OrderedMap", "pop_last")
        entry = node.key, node.value
        self._tree.delete_node(node)
        return entry

    # ---- navigation ------------------------------------------------------------
    def floor(self, key):
        return self._key(self._tree.floor(key))

    def ceiling(self, key):
        return self._key(self._tree.ceiling(key))

    def lower(self, key):
        return self._key(self._tree.lower(key))

    def higher(self, key):
        return self._key(self._tree.higher(key))

    def floor_entry(self, key) -> Optional[Entry]:
        return self._entry(self._tree.floor(key))

    def ceiling_entry(self, key) -> Optional[Entry]:
        return self._entry(self._tree.ceiling(key))

    # ---- views (snapshots) -----------------------------------------------------
    def head_view(self, bound, inclusive: bool = False) -> List[Entry]:
        """Entries with key < bound (<= if inclusive), ascending."""
        return self._collect(self._tree.iter_range(None, bound, high_inclusive=inclusive))

    def tail_view(self, bound, inclusive: bool = True) -> List[Entry]:
        """Entries with key >= bound (> if not inclusive), ascending."""
        return self._collect(self._tree.iter_range(bound, None, low_inclusive=inclusive))

    def range_view(self, low, high) -> List[Entry]:
        """Entries with low <= key < high."""
        return self.sub_view(low, high)

    def sub_view(self, low, high, low_inclusive: bool = True, high_inclusive: bool = False) -> List[Entry]:
        if self.comparator(low, high) > 0:
            raise InvalidRangeError(low, high)
        return self._collect(self._tree.iter_range(low, high, low_inclusive, high_inclusive))

    def iterate(self, ascending: bool = True) -> Iterator[Entry]:
        for node in self._tree.iter_nodes(ascending):
            yield node.key, node.value

    def descending_map(self) -> "OrderedMap":
        """Copy of this map ordered by the reversed comparator."""
        return OrderedMap(self.iterate(ascending=False), cmp=reverse_order(self.comparator))

    def copy(self) -> "OrderedMap":
        return OrderedMap(self.iterate(), cmp=self.comparator)

    def clear(self) -> None:
        self._tree.clear()

    # ---- MutableMapping protocol ---------------------------------------------
    def __getitem__(self, key):
        node = self._tree.find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key, value):
        self._tree.insert(key, value)

    def __delitem__(self, key):
        if not self._tree.delete(key):
            raise KeyError(key)

    def __contains__(self, key):
        return self.contains_key(key)

    def __iter__(self):
        for node in self._tree.iter_nodes():
            yield node.key

    def __reversed__(self):
        for node in self._tree.iter_nodes(ascending=False):
            yield node.key

    def __len__(self):
        return len(self._tree)

    def __repr__(self):
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.iterate())
        return f"OrderedMap({{{body}}})"

    # ---- helpers ---------------------------------------------------------------
    @staticmethod
    def _key(node):
        return None if node is None else node.key

    @staticmethod
    def _entry(node) -> Optional[Entry]:
        return None if node is None else (node.key, node.value)

    @staticmethod
    def _collect(nodes) -> List[Entry]:
        return [(node.key, node.value) for node in nodes]
