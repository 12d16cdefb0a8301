"""Builtins conversion for the type model and the generator output.

Type nodes encode as tagged dicts: ``{"tag": "array", "inner": {"tag": "string"}}``.
Other dataclasses (fields, enum members, declarations) encode as plain dicts.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import fields, is_dataclass
from functools import cache
from typing import Any, TypeVar, get_args, get_origin, get_type_hints

from dartgen.types import TypeNode

_TAG_KEY = "tag"
_MAX_TAGS_IN_ERROR = 10  # Maximum number of tags to show in error messages

T = TypeVar("T")


def to_builtins(obj: Any) -> Any:
    """Convert a type node, output structure or collection to JSON builtins.

    Args:
        obj: Any value built from type nodes, dataclasses and collections

    Returns:
        JSON-compatible Python value (dict, list, str, int, float, bool, None)

    """
    # 1. Type nodes carry their tag
    if isinstance(obj, TypeNode):
        result: dict[str, Any] = {_TAG_KEY: type(obj).tag}
        for f in fields(obj):
            result[f.name] = to_builtins(getattr(obj, f.name))
        return result

    # 2. Generic dataclass support (ObjectField, declarations, output)
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_builtins(getattr(obj, f.name)) for f in fields(obj)}

    # 3. Mappings
    if isinstance(obj, Mapping):
        return {k: to_builtins(v) for k, v in obj.items()}

    # 4. Sequences and sets become JSON arrays
    if isinstance(obj, set | frozenset):
        return [to_builtins(item) for item in sorted(obj)]
    if isinstance(obj, Sequence) and not isinstance(obj, str | bytes):
        return [to_builtins(item) for item in obj]

    # 5. Primitives pass through
    return obj


def from_builtins(data: dict[str, Any]) -> TypeNode:
    """Deserialize a tagged dict to a type node.

    Args:
        data: Dict with a 'tag' field

    Returns:
        Deserialized type node

    Raises:
        KeyError: If the 'tag' field is missing
        ValueError: If the tag is unknown

    """
    if _TAG_KEY not in data:
        msg = f"Missing required '{_TAG_KEY}' field"
        raise KeyError(msg)

    tag = data[_TAG_KEY]
    node_cls = TypeNode.registry.get(tag)
    if node_cls is None:
        available = list(TypeNode.registry)[:_MAX_TAGS_IN_ERROR]
        suffix = "..." if len(TypeNode.registry) > _MAX_TAGS_IN_ERROR else ""
        msg = f"Unknown tag '{tag}'. Available type tags: {available}{suffix}"
        raise ValueError(msg)

    return _decode_dataclass(node_cls, data)


def types_to_builtins(types: Mapping[str, TypeNode]) -> dict[str, Any]:
    """Encode a whole type model, keyed by fully-qualified name."""
    return {identity: to_builtins(node) for identity, node in types.items()}


def types_from_builtins(data: Mapping[str, Any]) -> dict[str, TypeNode]:
    """Decode a whole type model, keyed by fully-qualified name."""
    return {identity: from_builtins(node) for identity, node in data.items()}


@cache
def _hints(cls: type) -> dict[str, Any]:
    return get_type_hints(cls)


def _decode_dataclass(cls: type[T], data: Mapping[str, Any]) -> T:
    hints = _hints(cls)
    values = {
        f.name: _decode_value(data[f.name], hints[f.name])
        for f in fields(cls)  # type: ignore[arg-type]
        if f.name in data
    }
    return cls(**values)


def _decode_value(value: Any, hint: Any) -> Any:
    """Decode a value using the annotation of the field it belongs to."""
    if value is None:
        return None

    if get_origin(hint) is tuple:
        element = get_args(hint)[0]
        return tuple(_decode_value(item, element) for item in value)

    # Type nodes always go through the tag check, at any depth
    if isinstance(hint, type) and issubclass(hint, TypeNode):
        return from_builtins(value)

    if isinstance(value, dict):
        if _TAG_KEY in value:
            return from_builtins(value)
        if isinstance(hint, type) and is_dataclass(hint):
            return _decode_dataclass(hint, value)

    return value
