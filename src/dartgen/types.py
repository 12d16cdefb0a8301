"""Abstract type model consumed by the generator.

Each variant is a frozen dataclass registered by tag, mirroring the shape of
the host types an external parser extracts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeAlias, dataclass_transform

# Host numeric kinds grouped by the client type they map to
INTEGER_KINDS = frozenset(
    {
        "int",
        "int8",
        "int16",
        "int32",
        "int64",
        "uint",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
        "uintptr",
    },
)
FLOAT_KINDS = frozenset({"float32", "float64"})


@dataclass(frozen=True)
@dataclass_transform(frozen_default=True)
class TypeNode:
    """Base for type model nodes."""

    tag: ClassVar[str]
    registry: ClassVar[dict[str, type[TypeNode]]] = {}

    def __init_subclass__(cls, tag: str | None = None) -> None:
        """Register node subclass with automatic tag derivation."""
        dataclass(frozen=True)(cls)
        cls.tag = tag if tag is not None else cls.__name__.lower().removesuffix("type")

        if (existing := TypeNode.registry.get(cls.tag)) and existing is not cls:
            msg = (
                f"Tag '{cls.tag}' already registered to {existing}. "
                "Choose a different tag."
            )
            raise ValueError(msg)

        TypeNode.registry[cls.tag] = cls


@dataclass(frozen=True)
class EnumMember:
    """One enumeration member, in declaration order."""

    key: str
    value: str | int | float


@dataclass(frozen=True)
class ObjectField:
    """A field of an object type.

    Attributes:
        key: Name of the field on the wire (the JSON key)
        type: Type of the field value
        raw_name: Field name in the host language, defaults to ``key``
        optional: Field may be absent, converted as nullable
        excluded: Field is tagged for exclusion from the wire form

    """

    key: str
    type: TypeNode
    raw_name: str = ""
    optional: bool = False
    excluded: bool = False

    @property
    def host_name(self) -> str:
        """Host-language field name, falling back to the wire key."""
        return self.raw_name or self.key


class StringType(TypeNode, tag="string"):
    """Plain string."""


class NumberType(TypeNode, tag="number"):
    """Number of a host numeric kind: NumberType(kind="float64")."""

    kind: str = "int"


class BooleanType(TypeNode, tag="boolean"):
    """Boolean."""


class DateType(TypeNode, tag="date"):
    """Timestamp, carried on the wire as a string."""


class AnyType(TypeNode, tag="any"):
    """Untyped value."""


class ArrayType(TypeNode, tag="array"):
    """Homogeneous list: ArrayType(inner=StringType())."""

    inner: TypeNode


class MapType(TypeNode, tag="map"):
    """Key-value mapping: MapType(key=StringType(), value=BooleanType())."""

    key: TypeNode
    value: TypeNode


class NullableType(TypeNode, tag="nullable"):
    """Value that may be null: NullableType(inner=DateType())."""

    inner: TypeNode


class ObjectType(TypeNode, tag="object"):
    """Structured object.

    ``name`` is the fully-qualified identity of the host type, empty for
    inline (anonymous) objects. Fields keep the order the parser supplies.
    """

    name: str
    fields: tuple[ObjectField, ...] = ()


class EnumStringType(TypeNode, tag="enum_string"):
    """String enumeration with ordered members."""

    name: str
    members: tuple[EnumMember, ...] = ()


class EnumNumberType(TypeNode, tag="enum_number"):
    """Numeric enumeration with ordered members."""

    name: str
    members: tuple[EnumMember, ...] = ()
    kind: str = "int"


class TypeRef(TypeNode, tag="ref"):
    """Reference to a named type in the input mapping by identity.

    Lets a named object refer to itself without building a cyclic value.
    """

    name: str


EnumType: TypeAlias = EnumStringType | EnumNumberType
