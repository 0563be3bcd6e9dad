"""TreeView Protocol: the read-only query surface of a built tree.

Downstream code (printers, the pytest plugin, user code) depends on this
structural interface only.  Any class with conformant ``get_root``,
``get_children`` and ``get_loops`` methods passes ``isinstance`` checks.

Example::

    from json_loop_tree.protocols import TreeView

    class StaticView:
        def get_root(self) -> str:
            return "A"

        def get_children(self, name: str) -> list[str]:
            return ["B"] if name == "A" else []

        def get_loops(self) -> frozenset[str]:
            return frozenset()

    assert isinstance(StaticView(), TreeView)  # True
"""

from __future__ import annotations

from collections.abc import Sequence, Set
from typing import Protocol, runtime_checkable

__all__ = ["TreeView"]


@runtime_checkable
class TreeView(Protocol):
    """Structural protocol for read-only tree queries.

    - ``get_root()`` returns the root node's name.
    - ``get_children(name)`` returns child names in document order; an
      unknown name and a childless name both yield an empty sequence.
    - ``get_loops()`` returns the names of nodes that directly contain a
      loop marker.
    """

    def get_root(self) -> str: ...

    def get_children(self, name: str) -> Sequence[str]: ...

    def get_loops(self) -> Set[str]: ...
