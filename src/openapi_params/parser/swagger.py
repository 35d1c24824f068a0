"""Swagger 2.0 parameter declarations and operations.

In this dialect the request body is just another parameter ("in: body"),
and non-body parameters carry their type inline instead of in a schema.
"""

import logging

from openapi_params.config import ParserSettings
from openapi_params.errors import DocumentError
from openapi_params.parser.base import Operation, OperationParameter, OperationParameters
from openapi_params.parser.collector import ParameterCollector
from openapi_params.parser.expand import expand_parameter
from openapi_params.parser.naming import sanitize_name
from openapi_params.parser.operation import create_operation
from openapi_params.parser.refs import get_ref
from openapi_params.parser.schema import build_model, copy_fields

logger = logging.getLogger(__name__)

LOCATIONS = {
    "path": "path",
    "query": "query",
    "header": "header",
    "formData": "form",
    "body": "body",
}


def get_operation_parameter(document: dict, parameter: dict) -> OperationParameter:
    """Normalize one resolved parameter declaration."""
    if "name" not in parameter or "in" not in parameter:
        raise DocumentError(f"Parameter declaration needs 'name' and 'in': {parameter!r}")

    prop = parameter["name"]
    # Body parameters describe their payload with a schema, the rest inline.
    schema = parameter["schema"] if "schema" in parameter else parameter
    model = build_model(document, schema)
    return OperationParameter(
        location=LOCATIONS.get(parameter["in"], parameter["in"]),
        prop=prop,
        name=sanitize_name(prop),
        description=parameter.get("description") or model.description,
        is_required=parameter.get("required") is True,
        is_nullable=parameter.get("x-nullable") is True or model.is_nullable,
        **copy_fields(model, "name", "description", "is_required", "is_nullable"),
    )


def get_operation_parameters(
    document: dict,
    parameters: list[dict],
    settings: ParserSettings | None = None,
) -> OperationParameters:
    """Bucket parameter declarations by location.

    Declarations are trusted to be unique, so nothing is deduplicated.
    """
    settings = settings or ParserSettings()
    collector = ParameterCollector()

    for parameter_or_ref in parameters:
        declaration = get_ref(document, parameter_or_ref)
        parameter = get_operation_parameter(document, declaration)

        if parameter.prop == settings.version_marker:
            continue

        if parameter.location in ("path", "header"):
            collector.add(parameter)
        elif parameter.location in ("query", "form"):
            for candidate in expand_parameter(document, declaration, parameter, settings):
                collector.add(candidate)
        elif parameter.location == "body":
            # last body declaration wins
            collector.set_body(parameter)
        else:
            logger.debug("Ignoring parameter %r in unsupported location %r", parameter.prop, parameter.location)

    return collector.build()


def get_operation(
    document: dict,
    path: str,
    method: str,
    tag: str,
    op: dict,
    path_params: OperationParameters,
    settings: ParserSettings | None = None,
) -> Operation:
    collector = ParameterCollector()
    collector.extend(path_params)

    if op.get("parameters"):
        collector.extend(get_operation_parameters(document, op["parameters"], settings=settings))

    return create_operation(document, path, method, tag, op, collector.build())
