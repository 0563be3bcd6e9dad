"""json-loop-tree - flatten nested, loop-marked tree documents."""

from __future__ import annotations

from json_loop_tree.api import build_tree, load, loads, parse
from json_loop_tree.cache import TreeCache
from json_loop_tree.config import BuilderConfig
from json_loop_tree.errors import (
    ChildrenNotArrayError,
    ConfigError,
    DepthLimitError,
    DocumentLoadError,
    FieldTypeError,
    LoopInRootError,
    MissingNameError,
    MissingRootError,
    NodeNotObjectError,
)
from json_loop_tree.protocols import TreeView
from json_loop_tree.result import Tree
from json_loop_tree.tree.builder import TreeBuilder

__version__: str = "0.1.0"
__all__: list[str] = [
    "BuilderConfig",
    "ChildrenNotArrayError",
    "ConfigError",
    "DepthLimitError",
    "DocumentLoadError",
    "FieldTypeError",
    "LoopInRootError",
    "MissingNameError",
    "MissingRootError",
    "NodeNotObjectError",
    "Tree",
    "TreeBuilder",
    "TreeCache",
    "TreeView",
    "build_tree",
    "load",
    "loads",
    "parse",
]
