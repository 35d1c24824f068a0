"""Schema node -> canonical Model.

References are never followed for properties, which keeps the walk finite
on self-referential schemas; a referenced type shows up as a `reference`
model and lands in `imports`. Only `allOf` members are resolved, so their
properties can be merged into the composite.
"""

from typing import Any

from openapi_params.parser.base import EnumValue, Model
from openapi_params.parser.refs import get_ref, is_ref, ref_name

PRIMITIVE_TYPES = {
    "string": "string",
    "integer": "number",
    "number": "number",
    "boolean": "boolean",
    "file": "binary",
    "null": "null",
}

# schema keyword -> Model field
CONSTRAINT_FIELDS = {
    "maximum": "maximum",
    "exclusiveMaximum": "exclusive_maximum",
    "minimum": "minimum",
    "exclusiveMinimum": "exclusive_minimum",
    "multipleOf": "multiple_of",
    "maxLength": "max_length",
    "minLength": "min_length",
    "maxItems": "max_items",
    "minItems": "min_items",
    "uniqueItems": "unique_items",
    "maxProperties": "max_properties",
    "minProperties": "min_properties",
    "pattern": "pattern",
}


def schema_fields(schema: dict) -> dict[str, Any]:
    """Documentation, flags and constraints read straight off a schema node."""
    fields: dict[str, Any] = {
        "description": schema.get("description"),
        "deprecated": schema.get("deprecated") is True,
        "is_read_only": schema.get("readOnly") is True,
        "is_nullable": schema.get("nullable") is True or schema.get("x-nullable") is True,
        "format": schema.get("format"),
        "default": schema.get("default"),
    }
    for keyword, field in CONSTRAINT_FIELDS.items():
        if keyword in schema:
            fields[field] = schema[keyword]
    return fields


def build_model(document: dict, schema: dict, name: str = "", is_definition: bool = False) -> Model:
    """Build the canonical Model for a schema node."""
    if is_ref(schema):
        type_name = ref_name(schema["$ref"])
        return Model(
            name=name,
            export="reference",
            type=type_name,
            base=type_name,
            description=schema.get("description"),
            imports=[type_name],
        )

    fields = schema_fields(schema)

    schema_type = schema.get("type")
    mapped = PRIMITIVE_TYPES.get(schema_type, "any") if isinstance(schema_type, str) else "any"

    if "enum" in schema:
        enums = _enum_values(schema)
        return Model(
            name=name,
            export="enum",
            type=mapped if mapped != "any" else "string",
            base=mapped if mapped != "any" else "string",
            is_definition=is_definition,
            enum=enums,
            enums=enums,
            **fields,
        )

    if schema_type == "array":
        items = build_model(document, schema.get("items") or {})
        return Model(
            name=name,
            export="array",
            type=items.type,
            base=items.base,
            template=items.template,
            link=None if items.export in ("primitive", "reference") else items,
            is_definition=is_definition,
            imports=items.imports,
            **fields,
        )

    if "properties" in schema or "allOf" in schema:
        properties, imports = _collect_properties(document, schema, visited=set())
        return Model(
            name=name,
            export="object",
            type="any",
            base="any",
            is_definition=is_definition,
            imports=imports,
            properties=properties,
            **fields,
        )

    if schema_type == "object" and isinstance(schema.get("additionalProperties"), dict):
        values = build_model(document, schema["additionalProperties"])
        return Model(
            name=name,
            export="dictionary",
            type=values.type,
            base=values.base,
            link=None if values.export in ("primitive", "reference") else values,
            is_definition=is_definition,
            imports=values.imports,
            **fields,
        )

    return Model(name=name, type=mapped, base=mapped, is_definition=is_definition, **fields)


def _collect_properties(document: dict, schema: dict, visited: set[str]) -> tuple[list[Model], list[str]]:
    """Properties of an object schema, with allOf members merged in order.

    A later declaration of the same property name replaces the earlier one
    in place, so the first position is kept.
    """
    by_name: dict[str, Model] = {}

    for member in schema.get("allOf", []):
        if is_ref(member):
            ref = member["$ref"]
            if ref in visited:
                continue
            visited.add(ref)
        resolved = get_ref(document, member)
        member_properties, _ = _collect_properties(document, resolved, visited)
        for prop in member_properties:
            by_name[prop.name] = prop

    required = set(schema.get("required", []))
    for key, prop_schema in (schema.get("properties") or {}).items():
        model = build_model(document, prop_schema or {}, name=key)
        is_nullable = model.is_nullable or (prop_schema or {}).get("nullable") is True
        by_name[key] = model.model_copy(update={"is_required": key in required, "is_nullable": is_nullable})

    properties = list(by_name.values())
    return properties, _unique_imports(properties)


def _unique_imports(models: list[Model]) -> list[str]:
    imports: list[str] = []
    for model in models:
        for name in model.imports:
            if name not in imports:
                imports.append(name)
    return imports


def _enum_values(schema: dict) -> list[EnumValue]:
    descriptions = schema.get("x-enum-descriptions") or []
    names = schema.get("x-enum-varnames") or []
    values = []
    for index, value in enumerate(schema["enum"]):
        values.append(
            EnumValue(
                name=names[index] if index < len(names) else str(value),
                value=value,
                type="number" if isinstance(value, (int, float)) and not isinstance(value, bool) else "string",
                description=descriptions[index] if index < len(descriptions) else None,
            )
        )
    return values


def copy_fields(model: Model, *exclude: str) -> dict[str, Any]:
    """Model fields as keyword arguments, for building a derived model."""
    return {field: getattr(model, field) for field in Model.model_fields if field not in exclude}
