"""Conversion of the abstract type model into client declarations.

The generator visits every root type, maps each node to a Descriptor and
collects one class or enumeration declaration per named type:

    output = generate({"pkg.User": ObjectType(name="pkg.User", fields=(...))})
    for obj in output.objects:
        print(obj.name, [f.name for f in obj.fields])

Converter expressions are composed while the recursion unwinds, so the
descriptor of ``List<Item?>`` carries
``ListConverter<Item?, Map<String, dynamic>?>(NullableConverter<...>(...))``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from dartgen.assembler import assemble
from dartgen.collector import DeclarationCollector
from dartgen.config import GeneratorConfig
from dartgen.declarations import (
    ConstantDeclaration,
    ConstantMember,
    ConversionContext,
    Descriptor,
    ExternalReference,
    FieldEntry,
    GeneratorOutput,
    ObjectDeclaration,
)
from dartgen.errors import UnsupportedTypeError
from dartgen.naming import (
    NameRegistry,
    enum_member_name,
    field_name,
    import_alias,
    split_qualified,
)
from dartgen.types import (
    FLOAT_KINDS,
    INTEGER_KINDS,
    AnyType,
    ArrayType,
    BooleanType,
    DateType,
    EnumNumberType,
    EnumStringType,
    EnumType,
    MapType,
    NullableType,
    NumberType,
    ObjectType,
    StringType,
    TypeNode,
    TypeRef,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

_OBJECT_BASE = "Map<String, dynamic>"


def number_type_name(kind: str) -> str:
    """Client type for a host numeric kind."""
    if kind in INTEGER_KINDS:
        return "int"
    if kind in FLOAT_KINDS:
        return "double"
    return "dynamic"


def _string_literal(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("$", "\\$")
    return f"'{escaped}'"


class DeclarationGenerator:
    """Converts one input type model into a set of declarations.

    All naming and memoization state belongs to the instance. Use a fresh
    instance per run; an instance must not be shared between threads.
    """

    def __init__(
        self,
        types: Mapping[str, TypeNode],
        config: GeneratorConfig | None = None,
    ) -> None:
        self.types = dict(types)
        self.config = config if config is not None else GeneratorConfig()
        self.collector = DeclarationCollector(NameRegistry(self.config.reserved_names))
        self.imported: set[str] = set()
        self.uses_time_package = False

        path = self.config.common_converter_path
        self._common_alias = import_alias(path) + "." if path else ""

    def builtin(self, expression: str) -> str:
        """Qualify a built-in converter expression."""
        return self._common_alias + expression

    def resolve(self, ref: TypeRef) -> TypeNode:
        """Look up the type a reference points to.

        Raises:
            KeyError: If the identity is not part of the input model

        """
        if ref.name not in self.types:
            available = sorted(self.types)
            msg = f"Type '{ref.name}' not found. Available types: {available}"
            raise KeyError(msg)
        return self.types[ref.name]

    def convert(
        self,
        node: TypeNode,
        context: ConversionContext | None = None,
    ) -> Descriptor:
        """Map a type node to its client descriptor.

        Args:
            node: Type node to convert
            context: Enclosing named type and field position, used to name
                anonymous types

        Raises:
            UnsupportedTypeError: If the node is not a known variant

        """
        if self.config.custom_converter is not None:
            if (custom := self.config.custom_converter(node)) is not None:
                return custom

        match node:
            case BooleanType():
                return self._primitive("bool", "false")
            case StringType():
                return self._primitive("String", "''")
            case NumberType(kind=kind):
                return self._primitive(number_type_name(kind), "0")
            case DateType():
                self.uses_time_package = True
                return Descriptor(
                    type="DateTime",
                    base="String",
                    converter=self.builtin("DateTimeConverter()"),
                    required=True,
                )
            case AnyType():
                return self._primitive("dynamic", "null")
            case ArrayType(inner=inner):
                return self._convert_array(inner, context)
            case MapType(key=key, value=value):
                return self._convert_map(key, value, context)
            case NullableType(inner=inner):
                return self._convert_nullable(inner, context)
            case EnumStringType() | EnumNumberType():
                return self._convert_enum(node, context)
            case ObjectType():
                return self._convert_object(node, context)
            case TypeRef():
                return self.convert(self.resolve(node), context)
            case _:
                raise UnsupportedTypeError(node)

    def _primitive(self, name: str, default: str) -> Descriptor:
        return Descriptor(
            type=name,
            base=name,
            converter=self.builtin(f"DoNothingConverter<{name}>()"),
            default=default,
        )

    def _convert_array(
        self,
        inner: TypeNode,
        context: ConversionContext | None,
    ) -> Descriptor:
        ct = self.convert(inner, context)
        converter = ""
        if ct.converter:
            converter = self.builtin(
                f"ListConverter<{ct.type}, {ct.base}>({ct.converter})",
            )
        return Descriptor(
            type=f"List<{ct.type}>",
            base=f"List<{ct.base}>",
            converter=converter,
            default="const []",
            import_alias=ct.import_alias,
        )

    def _convert_map(
        self,
        key: TypeNode,
        value: TypeNode,
        context: ConversionContext | None,
    ) -> Descriptor:
        # Keys travel as their wire text; the key converter is not used.
        # An anonymous key is named under <Enclosing>Key so it cannot share
        # the value's inline name.
        key_context = context
        if context is not None:
            key_context = ConversionContext(f"{context.enclosing}Key", context.position)
        kt = self.convert(key, key_context)
        vt = self.convert(value, context)
        type_name = f"Map<{kt.type}, {vt.type}>"
        if not vt.converter:
            return Descriptor(type=type_name, base=type_name, default="const {}")

        return Descriptor(
            type=type_name,
            base=f"Map<{kt.type}, {vt.base}>",
            converter=self.builtin(
                f"MapConverter<{kt.type}, {vt.type}, {vt.base}>({vt.converter})",
            ),
            default="const {}",
            import_alias=vt.import_alias,
        )

    def _convert_nullable(
        self,
        inner: TypeNode,
        context: ConversionContext | None,
    ) -> Descriptor:
        ct = self.convert(inner, context)
        if ct.nullable:
            return ct

        converter = ""
        if ct.converter:
            converter = self.builtin(
                f"NullableConverter<{ct.type}, {ct.base}>({ct.converter})",
            )
        return Descriptor(
            type=ct.type + "?",
            base=ct.base + "?",
            converter=converter,
            default="null",
            import_alias=ct.import_alias,
        )

    def _convert_enum(
        self,
        node: EnumType,
        context: ConversionContext | None,
    ) -> Descriptor:
        if (cached := self.collector.lookup(node.name)) is not None:
            return cached

        name = self.collector.reserve(node.name, context)
        if isinstance(node, EnumStringType):
            base = "String"
            members = tuple(
                ConstantMember(enum_member_name(m.key), _string_literal(str(m.value)))
                for m in node.members
            )
        else:
            base = number_type_name(node.kind)
            members = tuple(
                ConstantMember(enum_member_name(m.key), str(m.value))
                for m in node.members
            )

        self.collector.add_constant(ConstantDeclaration(name, base, members))

        # Default is the first member as declared, not as sorted
        first = members[0].name if members else ""
        return self.collector.remember(
            node.name,
            Descriptor(
                type=name,
                base=base,
                converter=f"{name}Converter()",
                default=f"{name}.{first}",
            ),
        )

    def _convert_object(
        self,
        node: ObjectType,
        context: ConversionContext | None,
    ) -> Descriptor:
        if (cached := self.collector.lookup(node.name)) is not None:
            return cached

        if self.config.external_resolver is not None:
            if (ref := self.config.external_resolver(node)) is not None:
                return self.collector.remember(node.name, self._external(node, ref))

        name = self.collector.reserve(node.name, context)
        descriptor = self.collector.remember(
            node.name,
            Descriptor(
                type=name,
                base=_OBJECT_BASE,
                converter=f"{name}Converter()",
                required=True,
            ),
        )

        entries: list[FieldEntry] = []
        for position, field in enumerate(node.fields):
            field_type = field.type
            if field.optional:
                field_type = NullableType(inner=field_type)

            ct = self.convert(field_type, ConversionContext(name, position))
            entries.append(
                FieldEntry(
                    name=field_name(field.host_name),
                    key=field.key,
                    type=ct.type,
                    converter=ct.converter,
                    default=ct.default,
                    required=ct.required,
                    ignored=field.excluded,
                ),
            )

        entries.sort(key=lambda e: e.key)
        self.collector.add_object(ObjectDeclaration(name, tuple(entries)))
        return descriptor

    def _external(self, node: ObjectType, ref: ExternalReference) -> Descriptor:
        alias = import_alias(ref.path)
        self.imported.add(ref.path)
        logger.debug("Redirecting %s to %s in %s", node.name, ref.name, ref.path)
        return Descriptor(
            type=f"{alias}.{ref.name}",
            base=_OBJECT_BASE,
            converter=f"{alias}.{ref.name}Converter()",
            required=True,
            import_alias=alias,
        )

    def generate(self) -> GeneratorOutput:
        """Convert every root type and assemble the sorted output."""
        for identity in sorted(self.types):
            _, tail = split_qualified(identity)
            self.convert(self.types[identity], ConversionContext(tail))

        output = assemble(
            self.collector.objects,
            self.collector.constants,
            self.imported,
            common_converter_path=self.config.common_converter_path,
            uses_time_package=self.uses_time_package,
        )
        logger.info(
            "Generated %d classes, %d enums and %d imports from %d types",
            len(output.objects),
            len(output.constants),
            len(output.imports),
            len(self.types),
        )
        return output


def generate(
    types: Mapping[str, TypeNode],
    config: GeneratorConfig | None = None,
    **options: Any,
) -> GeneratorOutput:
    """Run one generation over a type model.

    Args:
        types: Fully-qualified type name to type node
        config: Generator options
        **options: Overrides of individual GeneratorConfig fields

    Returns:
        The sorted declaration set

    Example:
        output = generate(types, reserved_names=["app.models.User"])

    """
    config = config if config is not None else GeneratorConfig()
    if options:
        config = config.with_options(**options)
    return DeclarationGenerator(types, config).generate()
