"""dartgen - Dart declarations and converters from an abstract type model."""

from dartgen.assembler import assemble
from dartgen.codecs import (
    from_builtins,
    to_builtins,
)
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
    ImportDeclaration,
    ObjectDeclaration,
)
from dartgen.engine import DeclarationGenerator, generate
from dartgen.errors import GeneratorError, UnsupportedTypeError
from dartgen.formats.json import (
    dump_types,
    from_json,
    load_types,
    to_json,
)
from dartgen.naming import NameRegistry
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

__all__ = [
    # Type model
    "AnyType",
    "ArrayType",
    "BooleanType",
    # Declarations
    "ConstantDeclaration",
    "ConstantMember",
    "ConversionContext",
    # Generation
    "DeclarationCollector",
    "DeclarationGenerator",
    "DateType",
    "Descriptor",
    "EnumMember",
    "EnumNumberType",
    "EnumStringType",
    "ExternalReference",
    "FieldEntry",
    "GeneratorConfig",
    # Errors
    "GeneratorError",
    "GeneratorOutput",
    "ImportDeclaration",
    "MapType",
    "NameRegistry",
    "NullableType",
    "NumberType",
    "ObjectDeclaration",
    "ObjectField",
    "ObjectType",
    "StringType",
    "TypeNode",
    "TypeRef",
    "UnsupportedTypeError",
    "assemble",
    # Serialization
    "dump_types",
    "from_builtins",
    "from_json",
    "generate",
    "load_types",
    "to_builtins",
    "to_json",
]
