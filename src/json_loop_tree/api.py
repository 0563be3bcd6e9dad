"""Public API functions for json-loop-tree.

This module provides the user-facing functions: parse, build_tree, loads and
load.  Each call creates a fresh TreeBuilder, and every build creates its own
traversal state, so there is no global state between calls.
"""

from __future__ import annotations

from typing import Any

import httpx

from json_loop_tree.config import BuilderConfig
from json_loop_tree.loader import Source, load_document, read_document
from json_loop_tree.result import Tree
from json_loop_tree.tree.builder import TreeBuilder
from json_loop_tree.tree.decoder import decode_document

__all__ = ["build_tree", "load", "loads", "parse"]


def build_tree(root: Any, config: BuilderConfig | None = None) -> Tree:
    """Build a Tree from a raw root node.

    Args:
        root:   The root node itself, e.g. ``{"name": "A", "children": [...]}``.
        config: Builder settings.  Defaults to ``BuilderConfig()`` when None.

    Returns:
        The flattened Tree.

    Raises:
        ConfigError: On the first structural problem in the document.
    """
    return TreeBuilder(config or BuilderConfig()).build(root)


def parse(document: Any, config: BuilderConfig | None = None) -> Tree:
    """Build a Tree from a whole ``{"root": ...}`` document.

    Raises:
        MissingRootError: If document is not an object with a ``root`` member.
        ConfigError: On the first structural problem below the root.
    """
    config = config or BuilderConfig()
    return build_tree(decode_document(document, config.path_separator), config)


def loads(text: str | bytes, config: BuilderConfig | None = None) -> Tree:
    """Parse JSON text and build its Tree.

    Raises:
        DocumentLoadError: If text is not valid JSON.
        ConfigError: If the document is structurally invalid.
    """
    return parse(read_document(text), config)


def load(
    source: Source,
    config: BuilderConfig | None = None,
    client: httpx.Client | None = None,
) -> Tree:
    """Load a document from a path, stream or http(s) URL and build its Tree.

    Raises:
        DocumentLoadError: If the source cannot be read or is not valid JSON.
        ConfigError: If the document is structurally invalid.
    """
    return parse(load_document(source, client=client), config)
