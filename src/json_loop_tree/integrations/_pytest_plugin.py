"""Test helpers for projects that build trees with json-loop-tree.

Registered under the ``json_loop_tree`` name in the ``pytest11`` group, so
installing the distribution makes the ``assert_tree_shape`` fixture available
to any test session. The fixture checks a ``TreeView`` against the expected
shape and reports every mismatch in one assertion.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import pytest

from json_loop_tree.protocols import TreeView


@pytest.fixture(scope="session")
def assert_tree_shape() -> Any:
    """Fixture that returns a callable tree-shape asserter.

    Usage in tests::

        def test_sample(assert_tree_shape):
            tree = json_loop_tree.parse(document)
            assert_tree_shape(
                tree,
                root="A",
                children={"A": ["B", "C"], "B": [], "C": []},
                loops={"B"},
            )

    Returns:
        A callable ``_assert(tree, root=None, children=None, loops=None) -> None``.
        Each given expectation is checked; omitted ones are skipped.
        ``children`` is checked name by name through ``get_children`` (order
        matters), so it may describe a subset of the tree.
    """

    def _assert(
        tree: TreeView,
        root: str | None = None,
        children: Mapping[str, Sequence[str]] | None = None,
        loops: Iterable[str] | None = None,
    ) -> None:
        problems: list[str] = []
        if root is not None and tree.get_root() != root:
            problems.append(f"root: expected {root!r}, got {tree.get_root()!r}")
        for name, expected in (children or {}).items():
            actual = list(tree.get_children(name))
            if actual != list(expected):
                problems.append(
                    f"children({name}): expected {list(expected)}, got {actual}"
                )
        if loops is not None and set(tree.get_loops()) != set(loops):
            problems.append(
                f"loops: expected {sorted(loops)}, got {sorted(tree.get_loops())}"
            )
        if problems:
            raise AssertionError("Tree shape mismatch:\n  " + "\n  ".join(problems))

    return _assert
