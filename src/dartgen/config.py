"""Generator configuration."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

from dartgen.declarations import Descriptor, ExternalReference
from dartgen.types import ObjectType, TypeNode

ExternalResolver: TypeAlias = Callable[[ObjectType], ExternalReference | None]
CustomConverter: TypeAlias = Callable[[TypeNode], Descriptor | None]


@dataclass(frozen=True)
class GeneratorConfig:
    """Options for one generation run.

    Attributes:
        reserved_names: Fully-qualified names already used in the target
            namespace (hand-written or previously generated code)
        external_resolver: Redirects an object type to a declaration in
            another generated unit; returning None inlines it
        custom_converter: Checked before built-in handling for every node;
            a returned descriptor replaces the built-in mapping
        common_converter_path: Unit providing the built-in converters; when
            set, their names are qualified with the unit's import alias

    """

    reserved_names: tuple[str, ...] = ()
    external_resolver: ExternalResolver | None = None
    custom_converter: CustomConverter | None = None
    common_converter_path: str = ""

    def with_options(self, **options: Any) -> GeneratorConfig:
        """Copy of this config with some options replaced."""
        if "reserved_names" in options:
            options["reserved_names"] = tuple(options["reserved_names"])
        return dataclasses.replace(self, **options)
