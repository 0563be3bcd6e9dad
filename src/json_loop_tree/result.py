"""Tree: the immutable, flattened result of a build.

This module provides the value type returned by ``parse()`` and
``TreeBuilder.build()``.  It satisfies the ``TreeView`` protocol.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

__all__ = ["Tree"]


@dataclass(frozen=True, slots=True)
class Tree:
    """Flattened, validated tree.

    Attributes:
        root:        Name of the top-level node.
        children_of: Read-only mapping from every visited named node to the
                     names of its named children, in document order.  Loop
                     markers are elided; childless nodes map to ``()``.
        loops:       Names of nodes directly containing at least one loop
                     marker.
    """

    root: str
    children_of: Mapping[str, tuple[str, ...]]
    loops: frozenset[str]

    @classmethod
    def from_parts(
        cls,
        root: str,
        children_of: Mapping[str, Any],
        loops: Any = (),
    ) -> Tree:
        """Build a Tree from plain containers, copying and freezing them."""
        frozen = {name: tuple(kids) for name, kids in children_of.items()}
        return cls(root, MappingProxyType(frozen), frozenset(loops))

    def __hash__(self) -> int:
        # Consistent with __eq__, which ignores the mapping's insertion order
        return hash((self.root, frozenset(self.children_of.items()), self.loops))

    # ------------------------------------------------------------------
    # TreeView Protocol surface
    # ------------------------------------------------------------------

    def get_root(self) -> str:
        return self.root

    def get_children(self, name: str) -> list[str]:
        """Return the children of ``name``; empty for unknown names."""
        return list(self.children_of.get(name, ()))

    def get_loops(self) -> frozenset[str]:
        return self.loops

    # ------------------------------------------------------------------
    # Conveniences
    # ------------------------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self.children_of

    def names(self) -> list[str]:
        """All recorded node names, in the order they were recorded."""
        return list(self.children_of)

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable representation; loops are sorted."""
        return {
            "root": self.root,
            "children": {name: list(kids) for name, kids in self.children_of.items()},
            "loops": sorted(self.loops),
        }
