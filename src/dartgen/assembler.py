"""Deterministic assembly of the collected declarations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dartgen.declarations import GeneratorOutput, ImportDeclaration
from dartgen.naming import import_alias

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dartgen.declarations import ConstantDeclaration, ObjectDeclaration


def assemble(
    objects: Iterable[ObjectDeclaration],
    constants: Iterable[ConstantDeclaration],
    imported: Iterable[str] = (),
    *,
    common_converter_path: str = "",
    uses_time_package: bool = False,
) -> GeneratorOutput:
    """Sort declarations and imports into the final output structure.

    Args:
        objects: Collected class declarations, in any order
        constants: Collected enumeration declarations, in any order
        imported: Paths of external units referenced by redirects
        common_converter_path: Unit providing the built-in converters
        uses_time_package: Timestamp support must be imported

    Returns:
        Output whose ordering depends only on declaration names and paths

    """
    paths = set(imported)
    if common_converter_path:
        paths.add(common_converter_path)

    return GeneratorOutput(
        objects=tuple(sorted(objects, key=lambda o: o.name)),
        constants=tuple(sorted(constants, key=lambda c: c.name)),
        imports=tuple(
            ImportDeclaration(path=path, alias=import_alias(path))
            for path in sorted(paths)
        ),
        uses_time_package=uses_time_package,
        common_converter_alias=(
            import_alias(common_converter_path) + "." if common_converter_path else ""
        ),
    )
