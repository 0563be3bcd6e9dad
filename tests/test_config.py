"""Tests for the BuilderConfig frozen dataclass.

Covers:
- Default values (path_separator=".", max_depth=None)
- Immutability (FrozenInstanceError on assignment)
- Validation of path_separator and max_depth
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_loop_tree.config import BuilderConfig


class TestBuilderConfigDefaults:
    def test_default_separator(self) -> None:
        assert BuilderConfig().path_separator == "."

    def test_default_max_depth(self) -> None:
        assert BuilderConfig().max_depth is None

    def test_equal_defaults(self) -> None:
        assert BuilderConfig() == BuilderConfig()


class TestBuilderConfigImmutability:
    def test_cannot_assign(self) -> None:
        config = BuilderConfig()
        with pytest.raises(FrozenInstanceError):
            config.max_depth = 3  # type: ignore[misc]


class TestBuilderConfigValidation:
    def test_empty_separator_rejected(self) -> None:
        with pytest.raises(ValueError, match="path_separator"):
            BuilderConfig(path_separator="")

    @pytest.mark.parametrize("depth", [0, -1])
    def test_non_positive_depth_rejected(self, depth: int) -> None:
        with pytest.raises(ValueError, match="max_depth must be >= 1"):
            BuilderConfig(max_depth=depth)

    def test_depth_one_accepted(self) -> None:
        assert BuilderConfig(max_depth=1).max_depth == 1
