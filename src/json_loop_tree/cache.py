"""TreeCache: LRU-backed memo of built Trees.

Keys are the canonical JSON text of a document (object members sorted, no
whitespace), so two documents that differ only in member order share one
entry while array order, which drives child order, stays significant.
Failed builds raise as usual and leave the cache untouched.

Each ``TreeCache`` instance maintains its own ``LRUCache``; there is no
class-level shared state.

Example::

    from json_loop_tree.cache import TreeCache

    cache = TreeCache(max_size=64)
    tree = cache.get({"root": {"name": "A"}})        # builds
    same = cache.get({"root": {"name": "A"}})        # served from memory
    assert tree is same
"""

from __future__ import annotations

import json
import logging
from typing import Any

from cachetools import LRUCache

from json_loop_tree.config import BuilderConfig
from json_loop_tree.result import Tree
from json_loop_tree.tree.builder import TreeBuilder
from json_loop_tree.tree.decoder import decode_document

logger = logging.getLogger(__name__)

__all__ = ["TreeCache"]


class TreeCache:
    """LRU cache in front of a TreeBuilder.

    Args:
        config:   Builder configuration shared by every cached build.
        max_size: Maximum number of Trees held.  Defaults to 128.  The
            least-recently-used entry is evicted silently when exceeded.
    """

    def __init__(self, config: BuilderConfig | None = None, max_size: int = 128) -> None:
        self._builder = TreeBuilder(config or BuilderConfig())
        self._cache: LRUCache[str, Tree] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of Trees this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of Trees stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, document: Any) -> Tree:
        """Return the Tree for a ``{"root": ...}`` document, building on a miss.

        Raises:
            ConfigError: If the document is invalid.
            TypeError: If the document holds values JSON cannot represent.
        """
        key = json.dumps(document, sort_keys=True, separators=(",", ":"))
        tree = self._cache.get(key)
        if tree is not None:
            logger.debug("Tree cache hit (%d entries)", self.curr_size)
            return tree

        logger.debug("Tree cache miss (%d entries)", self.curr_size)
        root = decode_document(document, self._builder.config.path_separator)
        tree = self._builder.build(root)
        self._cache[key] = tree
        return tree

    def clear(self) -> None:
        """Drop every cached Tree."""
        self._cache.clear()
