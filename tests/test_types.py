"""Tests for dartgen.types module."""

import pytest

from dartgen.types import (
    AnyType,
    ArrayType,
    BooleanType,
    DateType,
    EnumMember,
    EnumNumberType,
    EnumStringType,
    MapType,
    NullableType,
    NumberType,
    ObjectField,
    ObjectType,
    StringType,
    TypeNode,
    TypeRef,
)

TAG_CASES = [
    (StringType, "string"),
    (NumberType, "number"),
    (BooleanType, "boolean"),
    (DateType, "date"),
    (AnyType, "any"),
    (ArrayType, "array"),
    (MapType, "map"),
    (NullableType, "nullable"),
    (ObjectType, "object"),
    (EnumStringType, "enum_string"),
    (EnumNumberType, "enum_number"),
    (TypeRef, "ref"),
]


class TestRegistry:
    """Test tag registration of type node variants."""

    @pytest.mark.parametrize(("cls", "tag"), TAG_CASES)
    def test_variant_tags(self, cls: type[TypeNode], tag: str) -> None:
        """Test that each variant is registered under its tag."""
        assert cls.tag == tag
        assert TypeNode.registry[tag] is cls

    def test_duplicate_tag_rejected(self) -> None:
        """Test that registering a second class under a taken tag fails."""
        with pytest.raises(ValueError, match="already registered"):

            class OtherString(TypeNode, tag="string"):
                pass

    def test_tag_derived_from_class_name(self) -> None:
        """Test default tag derivation strips the Type suffix."""

        class DurationType(TypeNode):
            seconds: int = 0

        assert DurationType.tag == "duration"
        del TypeNode.registry["duration"]


class TestNodes:
    """Test construction of type nodes."""

    def test_nodes_are_frozen(self) -> None:
        """Test that type nodes are immutable."""
        node = ArrayType(inner=StringType())
        with pytest.raises(AttributeError):
            node.inner = BooleanType()  # type: ignore[misc]

    def test_structural_equality(self) -> None:
        """Test that equal structures compare equal and hash alike."""
        a = MapType(key=StringType(), value=NumberType(kind="float64"))
        b = MapType(key=StringType(), value=NumberType(kind="float64"))
        assert a == b
        assert hash(a) == hash(b)

    def test_number_kind_default(self) -> None:
        """Test that numbers default to the int kind."""
        assert NumberType().kind == "int"

    def test_object_keeps_field_order(self) -> None:
        """Test that object fields preserve the order they were given in."""
        obj = ObjectType(
            name="pkg.User",
            fields=(
                ObjectField("zeta", StringType()),
                ObjectField("alpha", StringType()),
            ),
        )
        assert [f.key for f in obj.fields] == ["zeta", "alpha"]

    def test_enum_keeps_member_order(self) -> None:
        """Test that enumeration members preserve declaration order."""
        enum = EnumStringType(
            name="pkg.Status",
            members=(EnumMember("OK", "OK"), EnumMember("Failure", "Failure")),
        )
        assert [m.key for m in enum.members] == ["OK", "Failure"]


class TestObjectField:
    """Test ObjectField defaults."""

    def test_host_name_falls_back_to_key(self) -> None:
        field = ObjectField("s", StringType())
        assert field.host_name == "s"

    def test_host_name_prefers_raw_name(self) -> None:
        field = ObjectField("s", StringType(), raw_name="S")
        assert field.host_name == "S"

    def test_flags_default_off(self) -> None:
        field = ObjectField("s", StringType())
        assert not field.optional
        assert not field.excluded
