"""Error types raised by the generator."""

from __future__ import annotations

from typing import Any


class GeneratorError(Exception):
    """Base class for generator errors."""


class UnsupportedTypeError(GeneratorError, TypeError):
    """A type node falls outside the variants the generator can map.

    Raised when the upstream type model and the generator's mapping table
    have diverged. The run is aborted; there is no fallback mapping.
    """

    def __init__(self, node: Any) -> None:
        self.node = node
        msg = f"Unsupported type node: {type(node).__name__} ({node!r})"
        super().__init__(msg)
