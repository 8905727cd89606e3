# container_lab/demos/run_all.py
# Walks through the ordered set/map, priority queue and queue scenarios and prints the results.
#   python -m container_lab.demos.run_all [--size N] [--seed S] [--plot DIR]
from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path
from typing import List, Optional

import numpy as np

from ..core import config
from ..core.errors import ContainerError
from ..core.ordering import comparing, reverse_order
from ..structures.ordered_map import OrderedMap
from ..structures.ordered_set import OrderedSet
from ..structures.priority_queue import PriorityQueue
from ..structures.queues import Deque, FIFOQueue, LIFOStack

logger = logging.getLogger("container_lab.demos")


def _section(title: str):
    print(f"\n=== {title} ===")


def ordered_set_navigation() -> OrderedSet:
    _section("Ordered set navigation")
    numbers = OrderedSet()
    for x in (50, 20, 80, 10, 30):
        numbers.add(x)
    added = numbers.add(20)
    print(f"set: {list(numbers)}  (re-adding 20 -> {added}, size {len(numbers)})")
    print(f"first={numbers.first()} last={numbers.last()}")
    print(f"head_view(50)   = {numbers.head_view(50)}")
    print(f"tail_view(30)   = {numbers.tail_view(30)}")
    print(f"range_view(20, 60) = {numbers.range_view(20, 60)}")
    print(f"floor(25)={numbers.floor(25)} ceiling(25)={numbers.ceiling(25)} "
          f"lower(30)={numbers.lower(30)} higher(30)={numbers.higher(30)}")
    print(f"descending: {list(numbers.descending_set())}")
    return numbers


def ordered_map_of_grades() -> OrderedMap:
    _section("Ordered map of grades")
    grades = OrderedMap({"Math": 4.5, "Physics": 3.8, "Chemistry": 4.2, "Biology": 4.0, "History": 4.7})
    for subject, grade in grades.iterate():
        print(f"  {subject}: {grade}")
    print(f"first_entry={grades.first_entry()} last_entry={grades.last_entry()}")
    print(f"before 'History': {grades.head_view('History')}")
    print(f"from 'Physics':   {grades.tail_view('Physics')}")
    print(f"'Biology'..'Math': {grades.range_view('Biology', 'Math')}")
    print(f"floor('English')={grades.floor('English')} ceiling('English')={grades.ceiling('English')}")
    print(f"descending: {list(grades.descending_map())}")

    grades.put_if_absent("Math", 1.0)
    grades.put_if_absent("Art", 3.9)
    print(f"after put_if_absent: Math={grades['Math']} Art={grades.get('Art')}")
    print(f"get_or_default('Music', 0.0) = {grades.get_or_default('Music', 0.0)}")
    return grades


def priority_queues() -> PriorityQueue:
    _section("Priority queues")
    values = [50, 10, 30, 20, 40]
    natural = PriorityQueue(values)
    print(f"natural order: peek={natural.peek()} -> {list(natural.drain())}")
    inverted = PriorityQueue(values, cmp=reverse_order())
    print(f"reversed order: {list(inverted.drain())}")

    # (priority, description); higher priority first, FIFO among equals
    by_priority = comparing(lambda t: t[0], reverse=True)
    tasks = PriorityQueue(cmp=by_priority)
    for t in [(2, "check email"), (5, "production bug"), (3, "team meeting"),
              (1, "update docs"), (4, "urgent code review"), (5, "security patch")]:
        tasks.insert(t)
    heap = PriorityQueue(tasks.to_list(), cmp=by_priority)  # kept for --plot
    print("tasks by priority:")
    while not tasks.is_empty():
        priority, what = tasks.extract_top()
        print(f"  [{priority}] {what}")
    return heap


def queues() -> None:
    _section("Deque, stack and bounded buffer")
    d = Deque()
    d.push_front(10); d.push_back(20); d.push_front(5); d.push_back(30)
    print(f"deque: {list(d)} front={d.peek_front()} back={d.peek_back()}")
    print(f"pop_front={d.pop_front()} pop_back={d.pop_back()} -> {list(d)}")

    history = LIFOStack()
    for page in ("google.com", "github.com", "stackoverflow.com", "youtube.com"):
        history.push(page)
    history.pop()
    print(f"back button -> current page {history.peek()}")

    buffer = FIFOQueue(maxlen=3)
    for item in ("d1", "d2", "d3", "d4", "d5"):
        if not buffer.offer(item):
            print(f"  buffer full, consumed {buffer.pop()}")
            buffer.offer(item)
        print(f"  produced {item} | buffer {list(buffer)}")


def tree_balance(size: int, seed: int) -> OrderedSet:
    _section(f"Balance on {size} shuffled keys")
    rng = np.random.default_rng(seed)
    keys = rng.permutation(size).tolist()
    s = OrderedSet(keys)
    height = s.tree.height()
    bound = 2 * math.log2(size + 1)
    black_height = s.tree.check()
    print(f"n={len(s)} height={height} bound 2*log2(n+1)={bound:.1f} black_height={black_height}")
    for k in keys[: size // 2]:
        s.remove(k)
    s.tree.check()
    print(f"after removing half: n={len(s)} height={s.tree.height()}")
    return s


def error_conditions() -> None:
    _section("Error conditions")
    empty = OrderedMap()
    for label, call in [
        ("OrderedMap().first()", empty.first),
        ("PriorityQueue().peek()", PriorityQueue().peek),
        ("range_view(60, 20)", lambda: OrderedSet([10, 20]).range_view(60, 20)),
    ]:
        try:
            call()
        except ContainerError as e:
            print(f"  {label}: {type(e).__name__}: {e}")
    print(f"  floor(5) on {{10, 20}} -> {OrderedSet([10, 20]).floor(5)}")


def _save_plots(out_dir: Path, numbers: OrderedSet, heap: PriorityQueue, big: OrderedSet) -> List[Path]:
    import matplotlib.pyplot as plt
    from ..plots.plotting import draw_heap, draw_tree

    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for name, fig in [
        ("ordered_set.png", draw_tree(numbers, title="OrderedSet {50,20,80,10,30}")),
        ("task_heap.png", draw_heap(heap, title="Task heap", label=lambda t: str(t[0]))),
        ("balance.png", draw_tree(big, title="Shuffled keys", label=lambda k: "")),
    ]:
        path = out_dir / name
        fig.savefig(path, dpi=160, bbox_inches="tight")
        plt.close(fig)
        written.append(path)
        logger.info("wrote %s", path)
    return written


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Ordered containers and priority queues, scenario by scenario.")
    ap.add_argument("--size", type=int, default=config.DEMO_SIZE, help="keys in the balance walkthrough")
    ap.add_argument("--seed", type=int, default=config.DEMO_SEED)
    ap.add_argument("--plot", type=Path, default=None, help="directory to save tree/heap figures")
    args = ap.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if args.size < 1:
        raise SystemExit("--size must be at least 1")

    numbers = ordered_set_navigation()
    ordered_map_of_grades()
    heap = priority_queues()
    queues()
    big = tree_balance(args.size, args.seed)
    error_conditions()

    if args.plot is not None:
        for path in _save_plots(args.plot, numbers, heap, big):
            print(f"Wrote {path}")


if __name__ == "__main__":
    main()
