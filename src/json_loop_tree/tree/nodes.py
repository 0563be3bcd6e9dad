"""Typed node variants and JsonKind StrEnum for loop-tree documents.

A raw document node is decoded exactly once into one of two variants:

- ``LoopMarker``: the node carries ``"loop": true``. It has no name and is
  always a leaf; whatever else the raw node holds is ignored.
- ``NamedNode``: a regular node with a validated ``name`` and its raw
  ``children`` values (decoded lazily, one at a time, during the walk).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any


class JsonKind(StrEnum):
    """Enumeration of the observable kinds of a JSON value.

    StrEnum values are the lowercased member names:
    - OBJECT -> "object" : JSON object {}
    - ARRAY  -> "array"  : JSON array []
    - STRING -> "string" : JSON string
    - NUMBER -> "number" : JSON integer or float
    - TRUE   -> "true"   : the literal true
    - FALSE  -> "false"  : the literal false
    - NULL   -> "null"   : the literal null
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    TRUE = auto()
    FALSE = auto()
    NULL = auto()


def kind_of(value: Any) -> JsonKind:
    """Return the JsonKind of a parsed JSON value.

    Raises:
        TypeError: If value is not something a JSON parser produces.
    """
    # bool MUST be checked before int: bool subclasses int in Python
    if isinstance(value, bool):
        return JsonKind.TRUE if value else JsonKind.FALSE
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if value is None:
        return JsonKind.NULL
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


@dataclass(frozen=True, slots=True)
class LoopMarker:
    """A node standing for an unexpanded recursive reference."""


@dataclass(frozen=True, slots=True)
class NamedNode:
    """A regular, named node.

    Attributes:
        name:      The validated node name.
        children:  Raw child values in document order. Empty when the
                   ``children`` member was absent or null.
    """

    name: str
    children: tuple[Any, ...] = ()


Node = LoopMarker | NamedNode
