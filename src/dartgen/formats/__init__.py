"""Format adapters for serialization.

Each format module provides to_<format> and from_<format> functions
that work with the core to_builtins/from_builtins conversion.
"""

from dartgen.formats.json import dump_types, from_json, load_types, to_json

__all__ = ["dump_types", "from_json", "load_types", "to_json"]
