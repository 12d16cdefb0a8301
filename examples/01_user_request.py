"""
User Request Example
====================

Generating Dart declarations for a request payload, demonstrating:
- Building a type model by hand
- Shared and self-referencing named types
- Redirecting a type to another generated unit
- Handing the output to a renderer as JSON
"""

import logging

from dartgen import (
    ArrayType,
    DateType,
    EnumMember,
    EnumStringType,
    ExternalReference,
    MapType,
    NullableType,
    NumberType,
    ObjectField,
    ObjectType,
    StringType,
    TypeRef,
    generate,
    to_json,
)


# ============================================================================
# Define the type model
# ============================================================================

STATUS = EnumStringType(
    name="example.com/api.Status",
    members=(EnumMember("OK", "OK"), EnumMember("Failure", "Failure")),
)

ADDRESS = ObjectType(
    name="example.com/shared.Address",
    fields=(
        ObjectField("street", StringType(), raw_name="Street"),
        ObjectField("city", StringType(), raw_name="City"),
    ),
)

USER = ObjectType(
    name="example.com/api.User",
    fields=(
        ObjectField("name", StringType(), raw_name="Name"),
        ObjectField("age", NumberType(kind="int32"), raw_name="Age"),
        ObjectField("status", STATUS, raw_name="Status"),
        ObjectField("created_at", DateType(), raw_name="CreatedAt"),
        ObjectField("deleted_at", NullableType(inner=DateType()), raw_name="DeletedAt"),
        ObjectField("address", ADDRESS, raw_name="Address"),
        ObjectField("friends", ArrayType(inner=TypeRef("example.com/api.User"))),
        ObjectField("labels", MapType(key=StringType(), value=StringType())),
        ObjectField("password", StringType(), raw_name="Password", excluded=True),
        ObjectField(
            "settings",
            ObjectType(name="", fields=(ObjectField("theme", StringType()),)),
            optional=True,
        ),
    ),
)


def resolve_shared(obj: ObjectType) -> ExternalReference | None:
    """Objects from the shared package live in their own generated unit."""
    if obj.name.startswith("example.com/shared."):
        return ExternalReference(
            path="../shared/gen.dart",
            name=obj.name.rpartition(".")[2],
        )
    return None


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    output = generate(
        {"example.com/api.User": USER},
        external_resolver=resolve_shared,
        common_converter_path="package:common/converters.dart",
    )

    for obj in output.objects:
        print(f"class {obj.name}")
        for field in obj.fields:
            flag = "  (ignored)" if field.ignored else ""
            print(f"  {field.type} {field.name};  // '{field.key}'{flag}")
    for const in output.constants:
        members = ", ".join(f"{m.name} = {m.value}" for m in const.members)
        print(f"enum {const.name} {{ {members} }}")
    print()

    # What an external renderer would receive
    print(to_json(output))


if __name__ == "__main__":
    main()
