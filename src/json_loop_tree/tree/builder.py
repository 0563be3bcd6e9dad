"""TreeBuilder: converts a raw loop-tree node into a flattened Tree.

Walks the document depth-first, pre-order.  Each raw node is decoded once
into ``LoopMarker | NamedNode`` and dispatched on that variant:

- A named node pushes its name on the ancestor stack and a frame on the
  work-list; once its children are exhausted it records
  ``children_of[name]`` and pops both.
- A loop marker adds the nearest enclosing name (the top of the stack) to
  the loop set and contributes nothing to its parent's child list.

All mutable state lives in a ``_BuildContext`` created per ``build()`` call,
so one TreeBuilder can be shared freely.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from json_loop_tree.config import BuilderConfig
from json_loop_tree.errors import DepthLimitError, LoopInRootError
from json_loop_tree.result import Tree
from json_loop_tree.tree.decoder import decode_node
from json_loop_tree.tree.nodes import LoopMarker

logger = logging.getLogger(__name__)

__all__ = ["TreeBuilder"]


@dataclass
class _Frame:
    """A named node whose children are still being walked."""

    name: str
    pending: Iterator[Any]
    names: list[str] = field(default_factory=list)


_EXHAUSTED = object()


@dataclass
class _BuildContext:
    """Per-call traversal state; never escapes ``TreeBuilder.build``.

    ``frames`` is an explicit work-list standing in for the call stack, so
    document depth is bounded by memory rather than the interpreter's
    recursion limit.  ``stack`` always holds the frames' names, root first.
    """

    config: BuilderConfig
    stack: list[str] = field(default_factory=list)
    frames: list[_Frame] = field(default_factory=list)
    children_of: dict[str, tuple[str, ...]] = field(default_factory=dict)
    loops: set[str] = field(default_factory=set)

    def walk(self, root: Any) -> str:
        """Visit the whole document below ``root``; return the root's name."""
        self._enter(root)
        root_name = self.frames[0].name
        while self.frames:
            frame = self.frames[-1]
            child = next(frame.pending, _EXHAUSTED)
            if child is _EXHAUSTED:
                self._leave()
            else:
                self._enter(child)
        return root_name

    def _enter(self, value: Any) -> None:
        separator = self.config.path_separator
        node = decode_node(value, self.stack, separator)

        if isinstance(node, LoopMarker):
            if not self.stack:
                raise LoopInRootError(self.stack, separator)
            # Loop markers are leaves: their children are never walked
            self.loops.add(self.stack[-1])
            return

        max_depth = self.config.max_depth
        if max_depth is not None and len(self.stack) >= max_depth:
            raise DepthLimitError(self.stack, max_depth, separator)

        self.stack.append(node.name)
        self.frames.append(_Frame(node.name, iter(node.children)))

    def _leave(self) -> None:
        frame = self.frames.pop()
        self.stack.pop()
        self.children_of[frame.name] = tuple(frame.names)
        if self.frames:
            self.frames[-1].names.append(frame.name)


@dataclass
class TreeBuilder:
    """Builds an immutable Tree from the raw root node of a document.

    Example::
        builder = TreeBuilder()
        tree = builder.build({"name": "A", "children": [{"loop": True}]})
        # tree.root == "A", tree.loops == frozenset({"A"})
    """

    config: BuilderConfig = field(default_factory=BuilderConfig)

    def build(self, root: Any) -> Tree:
        """Walk ``root`` and return the flattened Tree.

        Args:
            root: The raw root node (the value of a document's ``root`` member).

        Returns:
            A Tree whose ``root`` is the root node's name.

        Raises:
            ConfigError: On the first structural problem found.  No partial
                Tree is ever returned.
        """
        context = _BuildContext(self.config)
        root_name = context.walk(root)

        logger.debug(
            "Built tree %r: %d nodes, %d loop parents",
            root_name,
            len(context.children_of),
            len(context.loops),
        )
        return Tree.from_parts(root_name, context.children_of, context.loops)
