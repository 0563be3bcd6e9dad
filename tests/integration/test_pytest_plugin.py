"""Integration tests for the json-loop-tree pytest plugin.

These tests verify that the assert_tree_shape fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require json-loop-tree to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from json_loop_tree import Tree, parse

SAMPLE = {
    "root": {
        "name": "A",
        "children": [
            {"name": "B", "children": [{"loop": True}]},
            {"name": "C"},
        ],
    }
}


def test_fixture_passes_matching_tree(assert_tree_shape: Any) -> None:
    assert_tree_shape(
        parse(SAMPLE),
        root="A",
        children={"A": ["B", "C"], "B": [], "C": []},
        loops={"B"},
    )


def test_fixture_checks_only_given_expectations(assert_tree_shape: Any) -> None:
    assert_tree_shape(parse(SAMPLE), children={"A": ["B", "C"]})


def test_fixture_fails_on_wrong_order(assert_tree_shape: Any) -> None:
    with pytest.raises(AssertionError, match=r"children\(A\)"):
        assert_tree_shape(parse(SAMPLE), children={"A": ["C", "B"]})


def test_fixture_error_message_contents(assert_tree_shape: Any) -> None:
    with pytest.raises(AssertionError) as exc_info:
        assert_tree_shape(parse(SAMPLE), root="Z", loops={"A"})

    error_message = str(exc_info.value)
    assert "Tree shape mismatch" in error_message
    assert "root: expected 'Z', got 'A'" in error_message
    assert "loops: expected ['A'], got ['B']" in error_message


def test_fixture_accepts_any_tree_view(assert_tree_shape: Any) -> None:
    assert_tree_shape(Tree.from_parts("X", {"X": []}), root="X", loops=set())


def test_plugin_discovery() -> None:
    """Verify assert_tree_shape appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q", "-p", "no:cacheprovider"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).parent),
    )
    assert "assert_tree_shape" in result.stdout, (
        f"Fixture not found in pytest fixtures list. stdout: {result.stdout[:500]}"
    )
