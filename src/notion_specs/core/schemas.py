"""Builders for JSON-schema-shaped descriptors (OpenAPI 3.0 dialect).

Every builder returns a fresh, mutable dict and never mutates its
arguments. Frozen inputs are thawed into plain copies, so shared
primitives can be nested into any number of endpoint schemas.
"""

from notion_specs.core.frozen import thaw


def _base(schema_type: str, title: str, description: str) -> dict:
    schema = {"type": schema_type, "title": title}
    if description:
        schema["description"] = description
    return schema


def make_string_schema(
    title: str,
    description: str = "",
    enum: list[str] | tuple[str, ...] | None = None,
    fmt: str | None = None,
) -> dict:
    schema = _base("string", title, description)
    if enum is not None:
        schema["enum"] = list(enum)
    if fmt is not None:
        schema["format"] = fmt
    return schema


def make_boolean_schema(title: str, description: str = "") -> dict:
    return _base("boolean", title, description)


def make_integer_schema(title: str, description: str = "") -> dict:
    return _base("integer", title, description)


def make_array_schema(title: str, items: dict, description: str = "") -> dict:
    schema = _base("array", title, description)
    schema["items"] = thaw(items)
    return schema


def make_object_schema(
    title: str,
    required_properties: dict[str, dict] | None = None,
    optional_properties: dict[str, dict] | None = None,
    description: str = "",
) -> dict:
    """Object schema with required properties listed before optional ones."""
    required_properties = required_properties or {}
    optional_properties = optional_properties or {}

    overlap = required_properties.keys() & optional_properties.keys()
    if overlap:
        raise ValueError(f"properties both required and optional: {sorted(overlap)}")

    schema = _base("object", title, description)
    properties = {}
    for name, prop in {**required_properties, **optional_properties}.items():
        properties[name] = thaw(prop)
    schema["properties"] = properties
    if required_properties:
        schema["required"] = list(required_properties)
    schema["additionalProperties"] = True
    return schema


def make_nullable(schema: dict) -> dict:
    nullable = thaw(schema)
    nullable["nullable"] = True
    return nullable


def make_one_of(title: str, variants: list[dict], description: str = "") -> dict:
    if not variants:
        raise ValueError("one-of schema needs at least one variant")
    schema = {"title": title, "oneOf": [thaw(v) for v in variants]}
    if description:
        schema["description"] = description
    return schema
