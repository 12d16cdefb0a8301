"""Conversion results and the declarations collected during a run."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Descriptor:
    """Result of converting one type node.

    Attributes:
        type: Client type name (e.g. ``List<Item?>``)
        base: Wire representation of the type (e.g. ``Map<String, dynamic>``)
        converter: Expression building the converter, empty when none is needed
        default: Default value literal, empty when the field is required
        required: Field must be present in the wire form
        import_alias: Alias of the external unit the type lives in

    """

    type: str
    base: str
    converter: str = ""
    default: str = ""
    required: bool = False
    import_alias: str = ""

    @property
    def nullable(self) -> bool:
        return self.type.endswith("?")


@dataclass(frozen=True)
class ExternalReference:
    """Redirect of an object type to a declaration generated elsewhere."""

    path: str
    name: str


@dataclass(frozen=True)
class ConversionContext:
    """Position of a conversion inside its enclosing named type."""

    enclosing: str
    position: int = 0


@dataclass(frozen=True)
class FieldEntry:
    """A field of a generated class."""

    name: str
    key: str
    type: str
    converter: str
    default: str
    required: bool
    ignored: bool = False


@dataclass(frozen=True)
class ObjectDeclaration:
    """A generated class, fields sorted by wire key."""

    name: str
    fields: tuple[FieldEntry, ...] = ()


@dataclass(frozen=True)
class ConstantMember:
    name: str
    value: str


@dataclass(frozen=True)
class ConstantDeclaration:
    """A generated enumeration, members in declaration order."""

    name: str
    base: str
    members: tuple[ConstantMember, ...] = ()


@dataclass(frozen=True)
class ImportDeclaration:
    path: str
    alias: str


@dataclass(frozen=True)
class GeneratorOutput:
    """Everything a renderer needs to emit one generated unit.

    Attributes:
        objects: Class declarations sorted by name
        constants: Enumeration declarations sorted by name
        imports: External units to import, sorted by path
        uses_time_package: Timestamp support must be imported
        common_converter_alias: Prefix of the built-in converter names,
            empty when they live in the default namespace

    """

    objects: tuple[ObjectDeclaration, ...] = ()
    constants: tuple[ConstantDeclaration, ...] = ()
    imports: tuple[ImportDeclaration, ...] = ()
    uses_time_package: bool = False
    common_converter_alias: str = ""

    def names(self) -> list[str]:
        """Names of every declaration in the output."""
        return [o.name for o in self.objects] + [c.name for c in self.constants]
