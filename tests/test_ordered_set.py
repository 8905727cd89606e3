import random

import numpy as np
import pytest

from container_lab.core.errors import EmptyContainerError, InvalidRangeError
from container_lab.core.ordering import comparing, reverse_order
from container_lab.structures.ordered_set import OrderedSet


@pytest.fixture
def numbers():
    s = OrderedSet()
    for x in (50, 20, 80, 10, 30):
        s.add(x)
    return s


def test_navigation_scenario(numbers):
    assert numbers.first() == 10
    assert numbers.last() == 80
    assert numbers.floor(25) == 20
    assert numbers.ceiling(25) == 30
    assert numbers.lower(30) == 20
    assert numbers.higher(30) == 50


def test_duplicate_add_is_ignored(numbers):
    assert numbers.add(20) is False
    assert len(numbers) == 5
    assert list(numbers) == [10, 20, 30, 50, 80]


def test_range_views(numbers):
    assert numbers.head_view(50) == [10, 20, 30]
    assert numbers.tail_view(30) == [30, 50, 80]
    assert numbers.range_view(20, 60) == [20, 30, 50]
    assert numbers.range_view(20, 20) == []
    with pytest.raises(InvalidRangeError):
        numbers.range_view(60, 20)


def test_absent_neighbours_are_none(numbers):
    assert numbers.floor(5) is None
    assert numbers.lower(10) is None
    assert numbers.ceiling(81) is None
    assert numbers.higher(80) is None


def test_descending(numbers):
    assert list(numbers.iterate(ascending=False)) == [80, 50, 30, 20, 10]
    d = numbers.descending_set()
    assert list(d) == [80, 50, 30, 20, 10]
    assert d.first() == 80
    assert d.head_view(30) == [80, 50]


def test_remove_and_contains(numbers):
    assert numbers.remove(30) is True
    assert numbers.remove(30) is False
    assert not numbers.contains(30)
    assert 30 not in numbers
    numbers.discard(999)
    assert len(numbers) == 4


def test_pop_first_drains_in_order():
    rng = random.Random(3)
    items = rng.sample(range(1000), 200)
    s = OrderedSet(items)
    out = []
    while s:
        out.append(s.pop_first())
    assert out == sorted(items)
    with pytest.raises(EmptyContainerError):
        s.pop_first()
    with pytest.raises(EmptyContainerError):
        s.first()


def test_set_algebra_matches_builtin_sets():
    a_items = {"Java", "Python", "C++", "JavaScript"}
    b_items = {"Python", "Ruby", "JavaScript", "Go"}
    a, b = OrderedSet(a_items), OrderedSet(b_items)
    assert list(a.union(b)) == sorted(a_items | b_items)
    assert list(a.intersection(b)) == sorted(a_items & b_items)
    assert list(a.difference(b)) == sorted(a_items - b_items)
    assert list(a | b) == sorted(a_items | b_items)
    assert list(a & b) == ["JavaScript", "Python"]
    assert list(a - b_items) == sorted(a_items - b_items)
    assert a == OrderedSet(a_items)


def test_operators_keep_left_comparator():
    a = OrderedSet([1, 2, 3], cmp=reverse_order())
    b = OrderedSet([3, 4])
    assert list(a | b) == [4, 3, 2, 1]
    assert isinstance(a & b, OrderedSet)


def test_ranking_by_attribute_key():
    students = [("Ana", 95), ("Carlos", 88), ("Beatriz", 92), ("Daniel", 85)]
    ranking = OrderedSet(students, cmp=comparing(lambda s: s[1]))
    assert [name for name, _ in ranking.iterate(ascending=False)] == ["Ana", "Beatriz", "Carlos", "Daniel"]


def test_views_are_snapshots(numbers):
    view = numbers.tail_view(20)
    numbers.add(90)
    numbers.remove(50)
    assert view == [20, 30, 50, 80]


def test_repr_and_copy(numbers):
    c = numbers.copy()
    numbers.clear()
    assert len(numbers) == 0
    assert repr(c) == "OrderedSet([10, 20, 30, 50, 80])"


def test_built_from_ndarray_and_generator():
    s = OrderedSet(np.array([3, 1, 2, 3]))
    assert [int(x) for x in s] == [1, 2, 3]
    assert list(OrderedSet(x * 10 for x in (5, 1, 3))) == [10, 30, 50]
    assert len(OrderedSet([])) == 0


def test_remove_missing_returns_false(numbers):
    assert numbers.remove(99) is False
    assert numbers.remove(20) is True
    assert 20 not in numbers
