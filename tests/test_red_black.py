import math
import random

import pytest

from container_lab.core.ordering import reverse_order
from container_lab.structures.red_black import BLACK, RedBlackTree


def _keys(nodes):
    return [n.key for n in nodes]


def test_insert_reports_new_keys_and_overwrites_values():
    t = RedBlackTree()
    assert t.insert(5, "a") is True
    assert t.insert(5, "b") is False
    assert len(t) == 1
    assert t.find(5).value == "b"


def test_random_inserts_and_deletes_keep_invariants():
    rng = random.Random(1234)
    t = RedBlackTree()
    model = set()
    for i in range(2000):
        k = rng.randrange(300)
        if rng.random() < 0.6:
            assert t.insert(k) == (k not in model)
            model.add(k)
        else:
            assert t.delete(k) == (k in model)
            model.discard(k)
        if i % 97 == 0:
            t.check()
    t.check()
    assert _keys(t.iter_nodes()) == sorted(model)
    assert _keys(t.iter_nodes(ascending=False)) == sorted(model, reverse=True)


def test_height_stays_logarithmic_on_sorted_input():
    t = RedBlackTree()
    n = 1023
    for k in range(n):
        t.insert(k)
    assert t.check() >= 1
    assert t.height() <= 2 * math.log2(n + 1)
    assert t.root.color == BLACK


def test_check_invariants_flag_validates_every_mutation():
    t = RedBlackTree(check_invariants=True)
    for k in [50, 20, 80, 10, 30, 25, 27, 26]:
        t.insert(k)
    for k in [20, 50, 26]:
        t.delete(k)
    assert _keys(t.iter_nodes()) == [10, 25, 27, 30, 80]


def test_check_detects_broken_colouring():
    t = RedBlackTree()
    for k in range(10):
        t.insert(k)
    t.root.color = "red"
    with pytest.raises(AssertionError):
        t.check()


def test_navigation_against_linear_scan():
    rng = random.Random(7)
    stored = sorted(rng.sample(range(0, 200, 3), 40))
    t = RedBlackTree()
    for k in stored:
        t.insert(k)
    for q in range(-5, 205):
        le = [k for k in stored if k <= q]
        ge = [k for k in stored if k >= q]
        lt = [k for k in stored if k < q]
        gt = [k for k in stored if k > q]
        assert (t.floor(q).key if le else t.floor(q)) == (le[-1] if le else None)
        assert (t.ceiling(q).key if ge else t.ceiling(q)) == (ge[0] if ge else None)
        assert (t.lower(q).key if lt else t.lower(q)) == (lt[-1] if lt else None)
        assert (t.higher(q).key if gt else t.higher(q)) == (gt[0] if gt else None)


def test_iter_range_bounds_and_direction():
    t = RedBlackTree()
    for k in [10, 20, 30, 50, 80]:
        t.insert(k)
    assert _keys(t.iter_range(20, 50)) == [20, 30]
    assert _keys(t.iter_range(20, 50, low_inclusive=False, high_inclusive=True)) == [30, 50]
    assert _keys(t.iter_range(None, 30, high_inclusive=True)) == [10, 20, 30]
    assert _keys(t.iter_range(25, None)) == [30, 50, 80]
    assert _keys(t.iter_range(20, 80, ascending=False)) == [50, 30, 20]
    assert _keys(t.iter_range(20, 20)) == []


def test_iteration_fails_if_tree_changes_underneath():
    t = RedBlackTree()
    for k in range(5):
        t.insert(k)
    it = t.iter_nodes()
    next(it)
    t.insert(99)
    with pytest.raises(RuntimeError):
        next(it)


def test_reverse_comparator_orders_descending():
    t = RedBlackTree(cmp=reverse_order())
    for k in [3, 1, 2]:
        t.insert(k)
    assert _keys(t.iter_nodes()) == [3, 2, 1]
    assert t.minimum().key == 3


def test_clear_empties_the_tree():
    t = RedBlackTree()
    for k in range(10):
        t.insert(k)
    t.clear()
    assert len(t) == 0
    assert t.minimum() is None
    assert t.height() == 0
    t.check()
