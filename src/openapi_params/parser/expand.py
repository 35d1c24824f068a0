"""Explode an object schema into one parameter per property.

Shared by both dialect aggregators and by request-body explosion, so a
call site binds object fields as separate named arguments.
"""

from openapi_params.config import ParserSettings
from openapi_params.parser.base import OperationParameter
from openapi_params.parser.naming import sanitize_name
from openapi_params.parser.refs import get_ref, is_ref
from openapi_params.parser.schema import build_model, copy_fields

EXPANDABLE_LOCATIONS = ("query", "form", "header", "cookie", "body")


def expand_schema_properties(
    document: dict,
    schema: dict,
    location: str,
    media_type: str | None = None,
) -> list[OperationParameter]:
    """Return the synthetic parameters for the top-level properties of `schema`.

    The order follows the model's property order. An empty list means the
    schema has no properties and the caller keeps its single parameter.
    """
    if location not in EXPANDABLE_LOCATIONS:
        raise ValueError(f"Cannot expand schema properties into location {location!r}")

    model = build_model(document, get_ref(document, schema))
    return [
        OperationParameter(
            location=location,
            prop=prop.name,
            name=sanitize_name(prop.name),
            is_definition=False,
            media_type=media_type,
            **copy_fields(prop, "name", "is_definition"),
        )
        for prop in model.properties
    ]


def expand_parameter(
    document: dict,
    declaration: dict,
    parameter: OperationParameter,
    settings: ParserSettings,
) -> list[OperationParameter]:
    """Candidates a query/form declaration contributes to its bucket.

    A declaration whose schema is a $ref to an object is exploded; anything
    else, including a referenced schema without properties, stays whole.
    """
    schema = declaration.get("schema")
    if settings.expand_parameters and is_ref(schema):
        expanded = expand_schema_properties(document, schema, parameter.location)
        if expanded:
            return expanded
    return [parameter]
