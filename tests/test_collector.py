"""Tests for dartgen.collector module."""

from dartgen.collector import DeclarationCollector
from dartgen.declarations import (
    ConstantDeclaration,
    ConversionContext,
    Descriptor,
    ObjectDeclaration,
)
from dartgen.naming import NameRegistry


class TestMemoization:
    """Test descriptor memoization by identity."""

    def test_lookup_unknown_identity(self) -> None:
        collector = DeclarationCollector()
        assert collector.lookup("pkg.User") is None

    def test_remember_then_lookup(self) -> None:
        collector = DeclarationCollector()
        descriptor = Descriptor(type="User", base="Map<String, dynamic>")
        assert collector.remember("pkg.User", descriptor) is descriptor
        assert collector.lookup("pkg.User") is descriptor

    def test_anonymous_types_are_not_remembered(self) -> None:
        """Test that an empty identity never hits the cache."""
        collector = DeclarationCollector()
        collector.remember("", Descriptor(type="UserInline000", base="Map"))
        assert collector.lookup("") is None


class TestReserve:
    """Test name minting through the registry."""

    def test_uses_given_registry(self) -> None:
        registry = NameRegistry(["other.User"])
        collector = DeclarationCollector(registry)
        assert collector.registry is registry
        name = collector.reserve("pkg.User", None)
        assert name.startswith("User_")
        assert registry.get("pkg.User") == name

    def test_inline_name(self) -> None:
        collector = DeclarationCollector()
        assert collector.reserve("", ConversionContext("Order", 2)) == "OrderInline002"


class TestDeclarations:
    """Test accumulation of declarations."""

    def test_add_and_count(self) -> None:
        collector = DeclarationCollector()
        collector.add_object(ObjectDeclaration("User"))
        collector.add_constant(ConstantDeclaration("Status", "String"))
        assert len(collector) == 2
        assert [o.name for o in collector.objects] == ["User"]
        assert [c.name for c in collector.constants] == ["Status"]
