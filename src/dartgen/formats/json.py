"""JSON format adapter."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from dartgen.codecs import (
    from_builtins,
    to_builtins,
    types_from_builtins,
    types_to_builtins,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from dartgen.types import TypeNode


def to_json(obj: Any, *, indent: int | None = 2) -> str:
    """Serialize a type node or a generator output to a JSON string.

    Args:
        obj: The object to serialize
        indent: JSON indentation level (default 2, None for compact)

    Returns:
        JSON string representation

    """
    return json.dumps(to_builtins(obj), indent=indent)


def from_json(s: str) -> TypeNode:
    """Deserialize a JSON string to a type node.

    Raises:
        ValueError: If the JSON doesn't contain a valid tagged object
        KeyError: If required 'tag' field is missing

    """
    data = json.loads(s)
    if not isinstance(data, dict):
        msg = "Expected JSON object with 'tag' field"
        raise ValueError(msg)
    return from_builtins(data)


def dump_types(types: Mapping[str, TypeNode], *, indent: int | None = 2) -> str:
    """Serialize a type model keyed by fully-qualified name."""
    return json.dumps(types_to_builtins(types), indent=indent, sort_keys=True)


def load_types(s: str) -> dict[str, TypeNode]:
    """Deserialize a type model keyed by fully-qualified name.

    Raises:
        ValueError: If the JSON is not an object of tagged type nodes

    """
    data = json.loads(s)
    if not isinstance(data, dict):
        msg = "Expected JSON object mapping type names to type nodes"
        raise ValueError(msg)
    return types_from_builtins(data)
