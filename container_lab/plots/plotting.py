# container_lab/plots/plotting.py
# Figures of the two core structures: a red-black tree (node colours shown) and a
# binary heap drawn as the complete tree its array encodes.
# Both functions return the Figure; saving/showing is up to the caller.
from __future__ import annotations
from typing import Callable, Dict, Tuple

import matplotlib
matplotlib.use("Agg")   # safe even if a display exists
import matplotlib.pyplot as plt
import numpy as np

from ..structures.red_black import RED, RedBlackTree

node_box   = dict(boxstyle="circle,pad=0.4", ec="0.2")
edge_style = dict(color="0.5", linewidth=1.0, zorder=1)


def _as_tree(obj) -> RedBlackTree:
    # OrderedMap / OrderedSet expose their engine as .tree
    return obj if isinstance(obj, RedBlackTree) else obj.tree


def _inorder_layout(tree: RedBlackTree) -> Dict[object, Tuple[int, int]]:
    """x = in-order rank, y = -depth."""
    pos = {}
    stack = []
    x, d, rank = tree.root, 0, 0
    while stack or x is not tree.nil:
        while x is not tree.nil:
            stack.append((x, d))
            x, d = x.left, d + 1
        x, d = stack.pop()
        pos[x] = (rank, -d)
        rank += 1
        x, d = x.right, d + 1
    return pos


def draw_tree(obj, title: str = "Red-black tree", label: Callable = str):
    tree = _as_tree(obj)
    pos = _inorder_layout(tree)

    fig, ax = plt.subplots(figsize=(max(4, 0.6 * len(pos)), max(3, 1.0 * tree.height() + 1)))
    for node, (x, y) in pos.items():
        for child in (node.left, node.right):
            if child is not tree.nil:
                cx, cy = pos[child]
                ax.plot([x, cx], [y, cy], **edge_style)
    for node, (x, y) in pos.items():
        fc = "tab:red" if node.color == RED else "black"
        ax.text(x, y, label(node.key), ha="center", va="center", color="white",
                fontsize=8, bbox=dict(node_box, fc=fc), zorder=2)

    ax.set_title(f"{title} (n={len(tree)}, height={tree.height()})")
    ax.set_xlim(-1, max(1, len(pos)))
    ax.set_ylim(-tree.height(), 1)
    ax.axis("off")
    fig.tight_layout()
    return fig


def heap_layout(n: int) -> np.ndarray:
    """(x, y) for each array slot of an n-element heap; row d holds slots 2^d-1 .. 2^(d+1)-2."""
    idx = np.arange(n)
    depth = np.floor(np.log2(idx + 1)).astype(int)
    offset = idx + 1 - 2 ** depth
    x = (offset + 0.5) / 2.0 ** depth
    return np.column_stack([x, -depth])


def draw_heap(pq, title: str = "Binary heap", label: Callable = str):
    items = pq.to_list()
    xy = heap_layout(len(items))

    fig, ax = plt.subplots(figsize=(max(4, 0.5 * len(items)), 3 + 0.5 * np.log2(len(items) + 1)))
    for i in range(1, len(items)):
        p = (i - 1) // 2
        ax.plot([xy[i, 0], xy[p, 0]], [xy[i, 1], xy[p, 1]], **edge_style)
    for i, item in enumerate(items):
        fc = "tab:blue" if i == 0 else "tab:gray"
        ax.text(xy[i, 0], xy[i, 1], label(item), ha="center", va="center", color="white",
                fontsize=8, bbox=dict(node_box, fc=fc), zorder=2)

    ax.set_title(f"{title} (n={len(items)})")
    ax.set_xlim(0, 1)
    ax.set_ylim((xy[:, 1].min() - 0.5) if len(items) else -1, 0.5)
    ax.axis("off")
    fig.tight_layout()
    return fig
