"""Tests for dartgen.assembler module."""

from dartgen.assembler import assemble
from dartgen.declarations import (
    ConstantDeclaration,
    ImportDeclaration,
    ObjectDeclaration,
)
from dartgen.naming import import_alias


class TestOrdering:
    """Test that output ordering depends on names only."""

    def test_objects_and_constants_sorted(self) -> None:
        output = assemble(
            [ObjectDeclaration("User"), ObjectDeclaration("Item")],
            [ConstantDeclaration("Status", "String"), ConstantDeclaration("Mode", "int")],
        )
        assert [o.name for o in output.objects] == ["Item", "User"]
        assert [c.name for c in output.constants] == ["Mode", "Status"]

    def test_input_order_does_not_matter(self) -> None:
        objects = [ObjectDeclaration(n) for n in ("B", "C", "A")]
        assert assemble(objects, []) == assemble(list(reversed(objects)), [])


class TestImports:
    """Test import collection."""

    def test_imports_deduplicated_and_sorted(self) -> None:
        output = assemble([], [], ["b/gen.dart", "a/gen.dart", "b/gen.dart"])
        assert output.imports == (
            ImportDeclaration("a/gen.dart", import_alias("a/gen.dart")),
            ImportDeclaration("b/gen.dart", import_alias("b/gen.dart")),
        )

    def test_common_converter_path_imported(self) -> None:
        output = assemble([], [], common_converter_path="common/converters.dart")
        assert [i.path for i in output.imports] == ["common/converters.dart"]
        assert output.common_converter_alias == "external_d464e21."

    def test_no_common_converter(self) -> None:
        output = assemble([], [])
        assert output.imports == ()
        assert output.common_converter_alias == ""


class TestFlags:
    def test_uses_time_package(self) -> None:
        assert assemble([], [], uses_time_package=True).uses_time_package
        assert not assemble([], []).uses_time_package

    def test_names(self) -> None:
        output = assemble(
            [ObjectDeclaration("User")],
            [ConstantDeclaration("Status", "String")],
        )
        assert output.names() == ["User", "Status"]
