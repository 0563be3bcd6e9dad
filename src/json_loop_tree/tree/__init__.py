"""Tree subpackage for document-to-tree conversion primitives.

Re-exports the public API for the tree module:
- LoopMarker, NamedNode: the tagged variant a raw node decodes into
- JsonKind: StrEnum of observable JSON value kinds, used in error messages
- decode_node, decode_document: the typed decode step at the document boundary
- TreeBuilder: walks a raw root node and produces a flattened Tree
"""

from json_loop_tree.tree.builder import TreeBuilder
from json_loop_tree.tree.decoder import decode_document, decode_node
from json_loop_tree.tree.nodes import JsonKind, LoopMarker, NamedNode, kind_of

__all__ = [
    "JsonKind",
    "LoopMarker",
    "NamedNode",
    "TreeBuilder",
    "decode_document",
    "decode_node",
    "kind_of",
]
