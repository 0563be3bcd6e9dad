"""Decoding of raw JSON values into typed tree nodes.

``decode_node`` inspects a single raw node and returns the tagged variant
``LoopMarker | NamedNode``.  Children are not decoded here: ``NamedNode``
keeps them raw so that each child is decoded when the walk reaches it, with
the ancestor path of that moment.

Validation order for one node (the first failure wins):
1. The value must be an object.
2. ``loop`` (null or absent means false) must be a boolean.  A true loop
   flag ends decoding: nothing else in the node is looked at.
3. ``name`` must be present and a string.
4. ``children`` (null or absent means empty) must be an array.  This check
   reports a path that already includes the node's own name.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from json_loop_tree.errors import (
    ChildrenNotArrayError,
    FieldTypeError,
    MissingNameError,
    MissingRootError,
    NodeNotObjectError,
)
from json_loop_tree.tree.nodes import LoopMarker, NamedNode, Node, kind_of

__all__ = ["decode_document", "decode_node"]


def decode_document(document: Any, separator: str = ".") -> Any:
    """Return the raw root node of a ``{"root": ...}`` document.

    Raises:
        MissingRootError: If document is not an object or has no ``root``.
    """
    if not isinstance(document, dict) or "root" not in document:
        raise MissingRootError(separator)
    return document["root"]


def decode_node(
    value: Any, ancestors: Sequence[str] = (), separator: str = "."
) -> Node:
    """Decode one raw node into a LoopMarker or a NamedNode.

    Args:
        value:      The raw node, as produced by a JSON parser.
        ancestors:  Names of the enclosing named nodes, root first.
        separator:  Path separator used in error messages.

    Returns:
        ``LoopMarker()`` for a loop node, otherwise a ``NamedNode``.

    Raises:
        NodeNotObjectError:    value is not an object.
        FieldTypeError:        ``loop`` or ``name`` has the wrong kind.
        MissingNameError:      a non-loop node lacks ``name``.
        ChildrenNotArrayError: ``children`` is present but not an array.
    """
    if not isinstance(value, dict):
        raise NodeNotObjectError(ancestors, kind_of(value), separator)

    loop = value.get("loop")
    if loop is not None and not isinstance(loop, bool):
        raise FieldTypeError(ancestors, "loop", "boolean", kind_of(loop), separator)
    if loop:
        return LoopMarker()

    name = value.get("name")
    if name is None:
        raise MissingNameError(ancestors, separator)
    if not isinstance(name, str):
        raise FieldTypeError(ancestors, "name", "string", kind_of(name), separator)

    children = value.get("children")
    if children is None:
        return NamedNode(name)
    if not isinstance(children, (list, tuple)):
        raise ChildrenNotArrayError([*ancestors, name], kind_of(children), separator)
    return NamedNode(name, tuple(children))
