"""Exceptions raised while loading and validating loop-tree documents.

Every validation failure is a ``ConfigError`` carrying the ancestor path at
the moment of failure: the names of the enclosing named nodes, root first.
``str(error)`` renders as ``"[<path>] <reason>"``; an empty path renders as
``"[]"``, meaning the failure happened in the root.

Loading failures (I/O, HTTP, malformed JSON) are ``DocumentLoadError``, not
``ConfigError``: the document never reached validation.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_loop_tree.tree.nodes import JsonKind

__all__ = [
    "ChildrenNotArrayError",
    "ConfigError",
    "DepthLimitError",
    "DocumentLoadError",
    "FieldTypeError",
    "LoopInRootError",
    "MissingNameError",
    "MissingRootError",
    "NodeNotObjectError",
]


class ConfigError(ValueError):
    """Base class for structural errors in a loop-tree document.

    Attributes:
        path:       Ancestor names, root first, at the moment of failure.
        reason:     Human-readable description without the path prefix.
        separator:  String used to join ``path`` when rendering.
    """

    def __init__(
        self, path: Sequence[str], reason: str, separator: str = "."
    ) -> None:
        self.path: tuple[str, ...] = tuple(path)
        self.reason = reason
        self.separator = separator
        super().__init__(f"[{self.rendered_path}] {reason}")

    @property
    def rendered_path(self) -> str:
        """The path joined by ``separator``; empty for the root."""
        return self.separator.join(self.path)


class MissingNameError(ConfigError):
    """A non-loop node has no ``name`` member."""

    def __init__(self, path: Sequence[str], separator: str = ".") -> None:
        super().__init__(path, "node without name", separator)


class LoopInRootError(ConfigError):
    """A loop marker appears with no enclosing named node."""

    def __init__(self, path: Sequence[str] = (), separator: str = ".") -> None:
        super().__init__(path, "LOOP IN ROOT", separator)


class NodeNotObjectError(ConfigError):
    """A node value is not a JSON object."""

    def __init__(
        self, path: Sequence[str], kind: JsonKind, separator: str = "."
    ) -> None:
        self.kind = kind
        super().__init__(path, f"node must be object: {kind.name}", separator)


class FieldTypeError(ConfigError):
    """A node member is present with the wrong JSON kind.

    Attributes:
        field:     The offending member (``"name"``, ``"loop"``, ``"children"``).
        expected:  The kind the member must have, as written in the message.
        kind:      The kind actually observed.
    """

    def __init__(
        self,
        path: Sequence[str],
        field: str,
        expected: str,
        kind: JsonKind,
        separator: str = ".",
    ) -> None:
        self.field = field
        self.expected = expected
        self.kind = kind
        super().__init__(path, f"{field} must be {expected}: {kind.name}", separator)


class ChildrenNotArrayError(FieldTypeError):
    """A node's ``children`` member is present but is not an array."""

    def __init__(
        self, path: Sequence[str], kind: JsonKind, separator: str = "."
    ) -> None:
        super().__init__(path, "children", "array", kind, separator)


class DepthLimitError(ConfigError):
    """A named node lies deeper than the configured ``max_depth``."""

    def __init__(
        self, path: Sequence[str], max_depth: int, separator: str = "."
    ) -> None:
        self.max_depth = max_depth
        super().__init__(path, f"depth limit exceeded: {max_depth}", separator)


class MissingRootError(ConfigError):
    """The document is not an object with a ``root`` member."""

    def __init__(self, separator: str = ".") -> None:
        super().__init__((), "document has no root", separator)


class DocumentLoadError(Exception):
    """A document could not be read or parsed as JSON."""
