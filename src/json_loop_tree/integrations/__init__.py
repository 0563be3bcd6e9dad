"""Integrations subpackage for json-loop-tree.

Contains the pytest plugin (auto-discovered via the pytest11 entry point),
which provides the ``assert_tree_shape`` fixture.
"""

__all__: list[str] = []
