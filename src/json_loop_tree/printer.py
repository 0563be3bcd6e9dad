"""Console rendering of any TreeView.

Output format, one line each, children listed depth-first from the root::

    root == A
    loops == [B]
    children(A) == [B, C]
    children(B) == []
    children(C) == []

Names can repeat in a document, so a name may be its own descendant in the
flattened view.  Rendering stops descending at a name already on the current
path.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from json_loop_tree.protocols import TreeView

__all__ = ["print_tree", "render_lines"]


def _fmt(names: Iterable[str]) -> str:
    return "[" + ", ".join(names) + "]"


def render_lines(tree: TreeView) -> Iterator[str]:
    """Yield the printable lines for ``tree``."""
    root = tree.get_root()
    yield f"root == {root}"
    yield f"loops == {_fmt(sorted(tree.get_loops()))}"

    children = tree.get_children(root)
    yield f"children({root}) == {_fmt(children)}"
    frames: list[tuple[str, Iterator[str]]] = [(root, iter(children))]
    on_path = {root}
    while frames:
        name, pending = frames[-1]
        child = next(pending, None)
        if child is None:
            frames.pop()
            on_path.discard(name)
            continue
        if child in on_path:
            continue
        children = tree.get_children(child)
        yield f"children({child}) == {_fmt(children)}"
        frames.append((child, iter(children)))
        on_path.add(child)


def print_tree(tree: TreeView, file: TextIO | None = None) -> None:
    """Write ``render_lines(tree)`` to ``file`` (stdout by default)."""
    out = file if file is not None else sys.stdout
    for line in render_lines(tree):
        print(line, file=out)
