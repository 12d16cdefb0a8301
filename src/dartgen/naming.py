"""Declaration naming: collision-free names, import aliases and casing."""

from __future__ import annotations

import hashlib
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dartgen.declarations import ConversionContext

logger = logging.getLogger(__name__)

_SUFFIX_DIGEST_LENGTH = 4
_ALIAS_DIGEST_LENGTH = 7
_ALIAS_PREFIX = "external_"
_FIELD_DELIMITERS = frozenset("_ -.")

# Dart keywords and built-in identifiers that cannot name a field
RESERVED_WORDS = frozenset(
    {
        "abstract",
        "as",
        "assert",
        "async",
        "await",
        "break",
        "case",
        "catch",
        "class",
        "const",
        "continue",
        "covariant",
        "default",
        "deferred",
        "do",
        "dynamic",
        "else",
        "enum",
        "export",
        "extends",
        "extension",
        "external",
        "factory",
        "false",
        "final",
        "finally",
        "for",
        "Function",
        "get",
        "hide",
        "if",
        "implements",
        "import",
        "in",
        "interface",
        "is",
        "late",
        "library",
        "mixin",
        "new",
        "null",
        "on",
        "operator",
        "part",
        "required",
        "rethrow",
        "return",
        "set",
        "show",
        "static",
        "super",
        "switch",
        "sync",
        "this",
        "throw",
        "true",
        "try",
        "typedef",
        "var",
        "void",
        "while",
        "with",
        "yield",
    },
)


def split_qualified(identity: str) -> tuple[str, str]:
    """Split ``pkg.path.Name`` into ``("pkg.path", "Name")``."""
    package, _, name = identity.rpartition(".")
    return package, name


def _digest(algorithm: str, text: str, length: int) -> str:
    digest = hashlib.new(algorithm, text.encode(), usedforsecurity=False)
    return digest.hexdigest()[:length]


def import_alias(path: str) -> str:
    """Stable import alias for an external unit path."""
    return _ALIAS_PREFIX + _digest("sha256", path, _ALIAS_DIGEST_LENGTH)


def inline_name(context: ConversionContext) -> str:
    """Name of an anonymous type at a position inside its enclosing type."""
    return f"{context.enclosing}Inline{context.position:03d}"


def enum_member_name(key: str) -> str:
    """Enum member name: first character lower-cased, the rest untouched.

    An all-uppercase key such as ``OK`` is lower-cased whole.
    """
    if key.isupper():
        return key.lower()
    return key[:1].lower() + key[1:]


def to_lower_camel(name: str) -> str:
    """Convert a host identifier to lowerCamelCase.

    Delimiters (``_``, ``-``, space, ``.``) are dropped and capitalize the next
    letter, as does a digit. An all-uppercase name is lower-cased first, so
    ``ID`` gives ``id`` and ``USER_ID`` gives ``userId``.
    """
    name = name.strip()
    if name.isupper():
        name = name.lower()

    chars: list[str] = []
    cap_next = False
    for i, ch in enumerate(name):
        if ch.isascii() and ch.isalpha():
            if cap_next:
                ch = ch.upper()
            elif i == 0:
                ch = ch.lower()
            chars.append(ch)
            cap_next = False
        elif ch.isdigit():
            chars.append(ch)
            cap_next = True
        else:
            cap_next = ch in _FIELD_DELIMITERS
    return "".join(chars)


def field_name(raw_name: str) -> str:
    """Client field name for a host field, avoiding reserved words."""
    name = to_lower_camel(raw_name)
    if name in RESERVED_WORDS:
        return name + "_"
    return name


class NameRegistry:
    """Namespace of generated declaration names for one run.

    Names are assigned once per fully-qualified identity. A name already held
    by a different identity, either pre-reserved by the caller or assigned
    earlier in the run, gets a suffix derived from the identity alone, so
    the same input always produces the same names.
    """

    def __init__(self, prereserved: Iterable[str] = ()) -> None:
        self._prereserved: dict[str, str] = {}
        for identity in prereserved:
            _, name = split_qualified(identity)
            self._prereserved[name] = identity
        self._reserved: set[str] = set()
        self._assigned: dict[str, str] = {}

    def __contains__(self, identity: str) -> bool:
        return identity in self._assigned

    def get(self, identity: str) -> str | None:
        """Name already assigned to an identity, if any."""
        return self._assigned.get(identity)

    @property
    def reserved(self) -> frozenset[str]:
        return frozenset(self._reserved)

    def is_taken(self, name: str, identity: str) -> bool:
        """Check whether ``name`` belongs to someone other than ``identity``."""
        owner = self._prereserved.get(name)
        return (owner is not None and owner != identity) or name in self._reserved

    def assign(self, identity: str, context: ConversionContext | None = None) -> str:
        """Assign the generated name for an identity.

        Args:
            identity: Fully-qualified type name, empty for anonymous types
            context: Enclosing type and field position, required for
                anonymous types

        Returns:
            The generated name. Repeated calls for the same named identity
            return the same name.

        Raises:
            ValueError: If an anonymous type has no enclosing context

        """
        if not identity:
            if context is None:
                msg = "Anonymous type needs an enclosing context to be named"
                raise ValueError(msg)
            # Reserved so a later named type cannot take it; no collision check.
            name = inline_name(context)
            self._reserved.add(name)
            return name

        if (name := self._assigned.get(identity)) is not None:
            return name

        _, name = split_qualified(identity)
        if self.is_taken(name, identity):
            suffixed = f"{name}_{_digest('sha1', identity, _SUFFIX_DIGEST_LENGTH)}"
            logger.debug("Name %s is taken, using %s for %s", name, suffixed, identity)
            name = suffixed

        self._reserved.add(name)
        self._assigned[identity] = name
        return name
