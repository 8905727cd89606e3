# container_lab/structures/red_black.py
# Red-black tree with parent pointers and a shared black NIL sentinel (CLRS ch. 13).
# OrderedMap and OrderedSet are thin facades over this class.
from __future__ import annotations

import logging
from typing import Any, Iterator, Optional, Tuple

from ..core import config
from ..core.ordering import Comparator, natural_order

logger = logging.getLogger(__name__)

RED = "red"
BLACK = "black"


class RBNode:
    __slots__ = ("key", "value", "color", "left", "right", "parent")

    def __init__(self, key, value, color: str, nil: Optional["RBNode"]):
        self.key = key
        self.value = value
        self.color = color
        self.left = nil
        self.right = nil
        self.parent = nil

    def __repr__(self):
        return f"RBNode({self.key!r}, {self.color})"


class RedBlackTree:
    """
    Balanced BST keyed through a comparator.

    - insert/delete/find/floor/ceiling/lower/higher: O(log n)
    - iter_range over k entries: O(log n + k)
    - height is at most 2*log2(n+1)

    `None` is reserved as the "open bound" marker of iter_range and is not a
    valid key. `version` changes on every structural modification so lazy
    iterators can detect that the tree moved under them.
    """

    def __init__(self, cmp: Comparator = natural_order, check_invariants: Optional[bool] = None):
        self.cmp = cmp
        self.nil = RBNode(None, None, BLACK, None)
        self.root = self.nil
        self.size = 0
        self.version = 0
        self.check_invariants = config.CHECK_INVARIANTS if check_invariants is None else check_invariants

    def __len__(self): return self.size

    # ---- lookup ----------------------------------------------------------------
    def find(self, key) -> Optional[RBNode]:
        x = self.root
        while x is not self.nil:
            c = self.cmp(key, x.key)
            if c == 0:
                return x
            x = x.left if c < 0 else x.right
        return None

    def minimum(self) -> Optional[RBNode]:
        return self._leftmost(self.root)

    def maximum(self) -> Optional[RBNode]:
        return self._rightmost(self.root)

    def floor(self, key) -> Optional[RBNode]:
        """Greatest node with node.key <= key."""
        x, best = self.root, None
        while x is not self.nil:
            c = self.cmp(key, x.key)
            if c == 0:
                return x
            if c < 0:
                x = x.left
            else:
                best, x = x, x.right
        return best

    def ceiling(self, key) -> Optional[RBNode]:
        """Least node with node.key >= key."""
        x, best = self.root, None
        while x is not self.nil:
            c = self.cmp(key, x.key)
            if c == 0:
                return x
            if c > 0:
                x = x.right
            else:
                best, x = x, x.left
        return best

    def lower(self, key) -> Optional[RBNode]:
        x, best = self.root, None
        while x is not self.nil:
            if self.cmp(key, x.key) <= 0:
                x = x.left
            else:
                best, x = x, x.right
        return best

    def higher(self, key) -> Optional[RBNode]:
        x, best = self.root, None
        while x is not self.nil:
            if self.cmp(key, x.key) >= 0:
                x = x.right
            else:
                best, x = x, x.left
        return best

    # ---- traversal -------------------------------------------------------------
    def iter_nodes(self, ascending: bool = True) -> Iterator[RBNode]:
        return self.iter_range(ascending=ascending)

    def iter_range(
        self,
        low: Any = None,
        high: Any = None,
        low_inclusive: bool = True,
        high_inclusive: bool = False,
        ascending: bool = True,
    ) -> Iterator[RBNode]:
        """Yield nodes with low <(=) key <(=) high; None leaves that side open."""
        version = self.version
        if ascending:
            if low is None:
                node = self._leftmost(self.root)
            else:
                node = self.ceiling(low) if low_inclusive else self.higher(low)
        else:
            if high is None:
                node = self._rightmost(self.root)
            else:
                node = self.floor(high) if high_inclusive else self.lower(high)

        while node is not None:
            if ascending and high is not None:
                c = self.cmp(node.key, high)
                if c > 0 or (c == 0 and not high_inclusive):
                    return
            if not ascending and low is not None:
                c = self.cmp(node.key, low)
                if c < 0 or (c == 0 and not low_inclusive):
                    return
            yield node
            if self.version != version:
                raise RuntimeError("tree changed size during iteration")
            node = self._successor(node) if ascending else self._predecessor(node)

    def height(self) -> int:
        def _h(x: RBNode) -> int:
            if x is self.nil:
                return 0
            return 1 + max(_h(x.left), _h(x.right))
        return _h(self.root)

    # ---- mutation --------------------------------------------------------------
    def insert(self, key, value=None) -> bool:
        """Insert or overwrite. Returns True if a new node was added."""
        parent, x, c = self.nil, self.root, 0
        while x is not self.nil:
            parent = x
            c = self.cmp(key, x.key)
            if c == 0:
                x.value = value
                return False
            x = x.left if c < 0 else x.right

        z = RBNode(key, value, RED, self.nil)
        z.parent = parent
        if parent is self.nil:
            self.root = z
        elif c < 0:
            parent.left = z
        else:
            parent.right = z
        self.size += 1
        self.version += 1
        self._insert_fixup(z)
        if self.check_invariants:
            self.check()
        return True

    def delete(self, key) -> bool:
        z = self.find(key)
        if z is None:
            return False
        self.delete_node(z)
        return True

    def delete_node(self, z: RBNode) -> None:
        nil = self.nil
        y, y_color = z, z.color
        if z.left is nil:
            x = z.right
            self._transplant(z, z.right)
        elif z.right is nil:
            x = z.left
            self._transplant(z, z.left)
        else:
            y = self._leftmost(z.right)
            y_color = y.color
            x = y.right
            if y.parent is z:
                x.parent = y
            else:
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color

        self.size -= 1
        self.version += 1
        if y_color == BLACK:
            self._delete_fixup(x)
        if self.check_invariants:
            self.check()

    def clear(self) -> None:
        logger.debug("clearing tree of %d nodes", self.size)
        self.root = self.nil
        self.size = 0
        self.version += 1

    # ---- validation ------------------------------------------------------------
    def check(self) -> int:
        """Validate order, colours and black heights. Returns the black height."""
        if self.root.color != BLACK:
            raise AssertionError("root must be black")
        if self.nil.color != BLACK:
            raise AssertionError("NIL sentinel must be black")
        count, black_height = self._check(self.root, None, None)
        if count != self.size:
            raise AssertionError(f"size mismatch: counted {count}, recorded {self.size}")
        logger.debug("red-black check ok: %d nodes, black height %d", count, black_height)
        return black_height

    def _check(self, x: RBNode, lo: Optional[RBNode], hi: Optional[RBNode]) -> Tuple[int, int]:
        if x is self.nil:
            return 0, 1
        if lo is not None and self.cmp(x.key, lo.key) <= 0:
            raise AssertionError(f"order violated: {x.key!r} not after {lo.key!r}")
        if hi is not None and self.cmp(x.key, hi.key) >= 0:
            raise AssertionError(f"order violated: {x.key!r} not before {hi.key!r}")
        for child in (x.left, x.right):
            if child is not self.nil and child.parent is not x:
                raise AssertionError(f"broken parent link under {x.key!r}")
        if x.color == RED and (x.left.color == RED or x.right.color == RED):
            raise AssertionError(f"red node {x.key!r} has a red child")
        n_left, bh_left = self._check(x.left, lo, x)
        n_right, bh_right = self._check(x.right, x, hi)
        if bh_left != bh_right:
            raise AssertionError(f"black height differs under {x.key!r}: {bh_left} vs {bh_right}")
        return n_left + n_right + 1, bh_left + (1 if x.color == BLACK else 0)

    # ---- internals -------------------------------------------------------------
    def _leftmost(self, x: RBNode) -> Optional[RBNode]:
        if x is self.nil:
            return None
        while x.left is not self.nil:
            x = x.left
        return x

    def _rightmost(self, x: RBNode) -> Optional[RBNode]:
        if x is self.nil:
            return None
        while x.right is not self.nil:
            x = x.right
        return x

    def _successor(self, x: RBNode) -> Optional[RBNode]:
        if x.right is not self.nil:
            return self._leftmost(x.right)
        y = x.parent
        while y is not self.nil and x is y.right:
            x, y = y, y.parent
        return None if y is self.nil else y

    def _predecessor(self, x: RBNode) -> Optional[RBNode]:
        if x.left is not self.nil:
            return self._rightmost(x.left)
        y = x.parent
        while y is not self.nil and x is y.left:
            x, y = y, y.parent
        return None if y is self.nil else y

    def _rotate_left(self, x: RBNode) -> None:
        y = x.right
        x.right = y.left
        if y.left is not self.nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self.nil:
            self.root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, x: RBNode) -> None:
        y = x.left
        x.left = y.right
        if y.right is not self.nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is self.nil:
            self.root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    def _insert_fixup(self, z: RBNode) -> None:
        while z.parent.color == RED:
            parent = z.parent
            grand = parent.parent
            if parent is grand.left:
                uncle = grand.right
                if uncle.color == RED:
                    parent.color = BLACK
                    uncle.color = BLACK
                    grand.color = RED
                    z = grand
                    continue
                if z is parent.right:
                    z = parent
                    self._rotate_left(z)
                    parent = z.parent
                parent.color = BLACK
                grand.color = RED
                self._rotate_right(grand)
            else:
                uncle = grand.left
                if uncle.color == RED:
                    parent.color = BLACK
                    uncle.color = BLACK
                    grand.color = RED
                    z = grand
                    continue
                if z is parent.left:
                    z = parent
                    self._rotate_right(z)
                    parent = z.parent
                parent.color = BLACK
                grand.color = RED
                self._rotate_left(grand)
        self.root.color = BLACK

    def _transplant(self, u: RBNode, v: RBNode) -> None:
        if u.parent is self.nil:
            self.root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent  # also set on NIL; _delete_fixup walks up from it

    def _delete_fixup(self, x: RBNode) -> None:
        while x is not self.root and x.color == BLACK:
            if x is x.parent.left:
                w = x.parent.right
                if w.color == RED:
                    w.color = BLACK
                    x.parent.color = RED
                    self._rotate_left(x.parent)
                    w = x.parent.right
                if w.left.color == BLACK and w.right.color == BLACK:
                    w.color = RED
                    x = x.parent
                else:
                    if w.right.color == BLACK:
                        w.left.color = BLACK
                        w.color = RED
                        self._rotate_right(w)
                        w = x.parent.right
                    w.color = x.parent.color
                    x.parent.color = BLACK
                    w.right.color = BLACK
                    self._rotate_left(x.parent)
                    x = self.root
            else:
                w = x.parent.left
                if w.color == RED:
                    w.color = BLACK
                    x.parent.color = RED
                    self._rotate_right(x.parent)
                    w = x.parent.left
                if w.right.color == BLACK and w.left.color == BLACK:
                    w.color = RED
                    x = x.parent
                else:
                    if w.left.color == BLACK:
                        w.right.color = BLACK
                        w.color = RED
                        self._rotate_left(w)
                        w = x.parent.left
                    w.color = x.parent.color
                    x.parent.color = BLACK
                    w.left.color = BLACK
                    self._rotate_right(x.parent)
                    x = self.root
        x.color = BLACK
