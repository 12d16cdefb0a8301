"""Collection of generated declarations, memoized by type identity."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dartgen.naming import NameRegistry

if TYPE_CHECKING:
    from dartgen.declarations import (
        ConstantDeclaration,
        ConversionContext,
        Descriptor,
        ObjectDeclaration,
    )

logger = logging.getLogger(__name__)


class DeclarationCollector:
    """Accumulates class and enumeration declarations for one run.

    Named types are recorded under their fully-qualified identity so every
    reference to the same type shares one declaration and one descriptor.
    Anonymous types (empty identity) are never memoized.
    """

    def __init__(self, registry: NameRegistry | None = None) -> None:
        self.registry = registry if registry is not None else NameRegistry()
        self.objects: list[ObjectDeclaration] = []
        self.constants: list[ConstantDeclaration] = []
        self._descriptors: dict[str, Descriptor] = {}

    def lookup(self, identity: str) -> Descriptor | None:
        """Descriptor already recorded for a named type."""
        if not identity:
            return None
        return self._descriptors.get(identity)

    def reserve(self, identity: str, context: ConversionContext | None) -> str:
        """Mint the declaration name for a type."""
        name = self.registry.assign(identity, context)
        logger.debug("Assigned %s to %s", name, identity or "<inline>")
        return name

    def remember(self, identity: str, descriptor: Descriptor) -> Descriptor:
        """Record the descriptor of a named type.

        Must be called before descending into the type's members so that a
        type referring to itself finds its own entry.
        """
        if identity:
            self._descriptors[identity] = descriptor
        return descriptor

    def add_object(self, declaration: ObjectDeclaration) -> None:
        self.objects.append(declaration)

    def add_constant(self, declaration: ConstantDeclaration) -> None:
        self.constants.append(declaration)

    def __len__(self) -> int:
        return len(self.objects) + len(self.constants)
