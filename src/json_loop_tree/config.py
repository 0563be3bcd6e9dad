"""BuilderConfig: immutable settings for TreeBuilder.

BuilderConfig is a frozen (immutable) dataclass validated on construction.
Public entry points accept ``config: BuilderConfig | None`` and fall back to
``BuilderConfig()`` when None.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["BuilderConfig"]


@dataclass(frozen=True, slots=True)
class BuilderConfig:
    """Immutable configuration for TreeBuilder.

    Attributes:
        path_separator: Joins ancestor names when rendering an error path.
            Must be non-empty.  Default ``"."``.
        max_depth: Maximum number of nested named nodes, root included.
            ``None`` (default) means unlimited.  Must be >= 1 when set.
    """

    path_separator: str = "."
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if not self.path_separator:
            msg = "path_separator must be a non-empty string"
            raise ValueError(msg)
        if self.max_depth is not None and self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)
